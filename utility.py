import argparse
import logging
from json import load, JSONDecodeError

from config import console, DEFAULTS, PARAMETER_LABELS

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Raised when a settings file cannot be used."""


def non_negative_int(value):
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if num < 0:
        raise argparse.ArgumentTypeError(f"value must be at least 0, got {num}")
    return num


def load_settings(path):
    """Read a JSON object of parameter defaults.

    Only the keys of ``DEFAULTS`` are used; each must hold a non-negative
    integer. Returns ``DEFAULTS`` updated with the file's values.
    """
    try:
        with open(path, "r") as f:
            loaded = load(f)
    except OSError as e:
        raise SettingsError(f"Could not read settings file {path}: {e}") from e
    except JSONDecodeError as e:
        raise SettingsError(f"Settings file {path} is not valid JSON: {e}") from e

    if not isinstance(loaded, dict):
        raise SettingsError(f"Settings file {path} must contain a JSON object")

    settings = dict(DEFAULTS)
    for key in DEFAULTS:
        if key not in loaded:
            continue
        value = loaded[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SettingsError(f"Setting '{key}' must be a non-negative integer, got {value!r}")
        settings[key] = value

    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
    return settings


def read_parameter(label, default):
    """Ask for one run parameter until a non-negative integer is given.

    Blank input keeps ``default``.
    """
    while True:
        answer = console.input(f"[prompt]{label} (default: {default}) > [/prompt]").strip()
        if not answer:
            return default
        try:
            value = int(answer)
        except ValueError:
            console.print(f"[error]{label} must be a whole number.[/error]")
            continue
        if value >= 0:
            return value
        console.print(f"[error]{label} cannot be negative.[/error]")


def prompt_parameters(current):
    console.print("[header]Mulligan Odds[/header]\n")
    console.print("[info]Press Enter to keep the default value.[/info]")
    return {key: read_parameter(label, current[key]) for key, label in PARAMETER_LABELS.items()}
