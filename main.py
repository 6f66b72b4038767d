import argparse
import logging
from sys import exit

from rich.logging import RichHandler
from rich.markup import escape

from config import console, DEFAULTS
from utility import SettingsError, load_settings, non_negative_int, prompt_parameters
from probabilities import validate_inputs, calc_odds
from graphing import build_odds_table, build_breakdown_table, export_csv, plot_odds

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Odds of seeing a card in a 7-card opening hand, with and without mulligans"
    )
    parser.add_argument("-d", "--deck", type=non_negative_int, help=f"Deck size (default: {DEFAULTS['deck']})")
    parser.add_argument("-n", "--min", type=non_negative_int, help=f"Fewest copies to evaluate (default: {DEFAULTS['min']})")
    parser.add_argument("-x", "--max", type=non_negative_int, help=f"Most copies to evaluate (default: {DEFAULTS['max']})")
    parser.add_argument("-m", "--mulls", type=non_negative_int, help=f"Most mulligans to evaluate (default: {DEFAULTS['mulls']})")
    parser.add_argument("-c", "--desire", type=non_negative_int, help=f"Copies wanted in hand (default: {DEFAULTS['desire']})")
    parser.add_argument("--settings", help="JSON file overriding the default values above")
    parser.add_argument("-i", "--interactive", action="store_true", help="Prompt for each value")
    parser.add_argument("--breakdown", action="store_true", help="Show the chance of first success per attempt")
    parser.add_argument("--csv", help="Write the odds table to this CSV file")
    parser.add_argument("--plot", help="Save a chart of the odds to this image file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug logging")
    return parser


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def resolve_parameters(args):
    values = load_settings(args.settings) if args.settings else dict(DEFAULTS)
    for key in DEFAULTS:
        given = getattr(args, key)
        if given is not None:
            values[key] = given
    if args.interactive:
        values = prompt_parameters(values)
    return values


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        values = resolve_parameters(args)
    except SettingsError as e:
        console.print(f"[error]{escape(str(e))}[/error]")
        return 1

    deck_size, min_copies, max_copies = values["deck"], values["min"], values["max"]
    max_mulls, desire_count = values["mulls"], values["desire"]
    logger.debug(
        "deck=%d min=%d max=%d mulls=%d desire=%d",
        deck_size, min_copies, max_copies, max_mulls, desire_count,
    )

    valid, error = validate_inputs(deck_size, min_copies, max_copies, max_mulls, desire_count)
    if not valid:
        console.print(f"[error]{error.message}[/error]")
        return 1

    odds = calc_odds(deck_size, min_copies, max_copies, max_mulls, desire_count)

    title = f"At least {desire_count} in {deck_size} cards"
    console.print(build_odds_table(odds, min_copies, title=title))
    if args.breakdown:
        console.print("\n[header]Chance of first success per attempt[/header]")
        console.print(build_breakdown_table(odds, min_copies))

    try:
        if args.csv:
            export_csv(odds, min_copies, args.csv)
            console.print(f"[success]Table saved to {escape(args.csv)}.[/success]")
        if args.plot:
            plot_odds(odds, min_copies, args.plot)
            console.print(f"[success]Chart saved to {escape(args.plot)}.[/success]")
    except (OSError, ValueError) as e:
        console.print(f"[error]Failed to write file: {escape(str(e))}[/error]")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
