import csv
import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator
import numpy as np
from rich.table import Table

from probabilities import attempt_breakdown

logger = logging.getLogger(__name__)


def format_percent(p):
    return f"{p * 100:.2f}%"


def table_rows(odds, min_copies):
    """Yield ``[copies, cell, cell, ...]`` rows, one per copy count."""
    for copy_index in range(odds.shape[1]):
        row = [str(copy_index + min_copies)]
        row += [format_percent(odds[mull, copy_index]) for mull in range(odds.shape[0])]
        yield row


def header_row(odds):
    return ["Copies"] + [f"Mull {mull}" for mull in range(odds.shape[0])]


def build_odds_table(odds, min_copies, title=None):
    table = Table(title=title, show_header=True, header_style="bold blue")
    headers = header_row(odds)
    table.add_column(headers[0], style="copies")
    for header in headers[1:]:
        table.add_column(header, justify="right", style="cyan")
    for row in table_rows(odds, min_copies):
        table.add_row(*row)
    return table


def build_breakdown_table(odds, min_copies):
    table = Table(show_header=True, header_style="bold yellow")
    table.add_column("Copies", style="copies")
    table.add_column("Label", style="green", no_wrap=True)
    table.add_column("Probability", justify="right", style="cyan")

    max_mulls = odds.shape[0] - 1
    for copy_index in range(odds.shape[1]):
        info = attempt_breakdown(odds[0, copy_index], max_mulls)
        copies = str(copy_index + min_copies)
        for label, p in info.items():
            table.add_row(copies, label, f"{p * 100:.4f}% ({p:.6f})")
            copies = ""
        table.add_section()
    return table


def export_csv(odds, min_copies, path, title="Odds of drawing at least the desired copies"):
    with open(path, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([title])
        writer.writerow(header_row(odds))
        writer.writerows(table_rows(odds, min_copies))
    logger.debug("Wrote odds table to %s", path)


def graph_set_up():
    fig, ax = plt.subplots(figsize=(10, 6))
    fig.patch.set_facecolor('black')
    ax.set_facecolor('black')
    ax.set_ylabel("Probability", color='white')
    ax.tick_params(colors='white')
    ax.set_yticks(np.arange(0, 1.01, 0.1))
    ax.set_yticks(np.arange(0, 1.01, 0.02), minor=True)
    ax.grid(True, linestyle='--', alpha=0.5, color='white')
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_ylim(0, 1)
    ax.spines['bottom'].set_color('white')
    ax.spines['left'].set_color('white')
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    return fig, ax


def plot_odds(odds, min_copies, path, line_style='-', marker_style='o'):
    """Save a chart of odds against mulligan count, one line per copy count."""
    colors = ['cyan', 'magenta', 'yellow', 'green', 'red', 'blue', 'orange', 'pink']
    mulls = np.arange(odds.shape[0])

    fig, ax = graph_set_up()
    ax.set_xlabel("Mulligans", color='white')
    for copy_index in range(odds.shape[1]):
        ax.plot(
            mulls,
            odds[:, copy_index],
            marker=marker_style,
            linestyle=line_style,
            color=colors[copy_index % len(colors)],
            label=f"{copy_index + min_copies} copies",
        )

    legend = ax.legend()
    for text in legend.get_texts():
        text.set_color('white')
    ax.set_title("Probability vs Mulligans", color='white')
    try:
        fig.savefig(path, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    logger.debug("Saved odds plot to %s", path)
