import logging

import numpy as np

from config import OPENING_HAND_SIZE, ValidationError

logger = logging.getLogger(__name__)


def validate_inputs(deck_size, min_copies, max_copies, max_mulls, desire_count):
    """Check the run parameters, stopping at the first broken rule.

    Returns ``(True, None)`` when the table can be computed, otherwise
    ``(False, error)`` with the matching :class:`ValidationError`.
    ``max_mulls`` is accepted as-is.
    """
    if min_copies > max_copies:
        return False, ValidationError.INVALID_RANGE
    if deck_size < max_copies:
        return False, ValidationError.DECK_TOO_SMALL
    if desire_count > min_copies:
        return False, ValidationError.INSUFFICIENT_COPIES
    if deck_size < OPENING_HAND_SIZE:
        return False, ValidationError.HAND_TOO_LARGE
    return True, None


def bin_coeff(n, k):
    """Number of ways to choose ``k`` items out of ``n``, as a float.

    Multiplies and divides in turn so the running value stays small; after
    each step it is itself a binomial coefficient, so the division is exact.
    """
    if k > n:
        return 0.0
    result = 1
    for d in range(1, k + 1):
        result *= n
        n -= 1
        result //= d
    return float(result)


def hypergeometric_pmf(deck_size, copies, drawn, hand_size=OPENING_HAND_SIZE):
    return (
        bin_coeff(copies, drawn)
        * bin_coeff(deck_size - copies, hand_size - drawn)
        / bin_coeff(deck_size, hand_size)
    )


def at_least_probability(deck_size, copies, desire_count, max_copies, hand_size=OPENING_HAND_SIZE):
    # Summing up to max_copies rather than copies is harmless: the pmf is 0
    # once drawn exceeds copies because bin_coeff(copies, drawn) is 0.
    upper = min(max_copies, hand_size)
    return sum(
        hypergeometric_pmf(deck_size, copies, drawn, hand_size)
        for drawn in range(desire_count, upper + 1)
    )


def compound_odds(base, attempts):
    """Chance of at least one success over independent attempts."""
    return 1 - (1 - base) ** attempts


def calc_odds(deck_size, min_copies, max_copies, max_mulls, desire_count):
    """Build the odds grid indexed ``[mull_count, copy_index]``.

    Column ``copy_index`` assumes ``min_copies + copy_index`` copies in the
    deck. Row 0 is the opening hand; row ``m`` is the chance of a hit within
    ``m`` mulligans, each mulligan a fresh independent draw.
    """
    odds = np.zeros((max_mulls + 1, max_copies - min_copies + 1))
    attempts = np.arange(2, max_mulls + 2)

    for copy_index in range(odds.shape[1]):
        copies = min_copies + copy_index
        base = at_least_probability(deck_size, copies, desire_count, max_copies)
        logger.debug("%d copies in %d cards: base odds %.6f", copies, deck_size, base)
        odds[0, copy_index] = base
        odds[1:, copy_index] = compound_odds(base, attempts)

    return odds


def attempt_breakdown(base, max_mulls):
    info = {}
    p_fail_so_far = 1.0
    for i in range(max_mulls + 1):
        attempt_name = "No Mulligan" if i == 0 else f"Mulligan {i}"
        info[attempt_name] = base * p_fail_so_far
        p_fail_so_far *= (1 - base)

    info["Total"] = 1 - p_fail_so_far
    return info
