from enum import Enum

from rich.theme import Theme
from rich.console import Console

custom_theme = Theme({
    "info": "cyan",
    "success": "green",
    "error": "bold red",
    "header": "bold magenta",
    "prompt": "bold blue",
    "copies": "bold green"
})

console = Console(theme=custom_theme)

# Every hand, including each mulligan, is a full redraw of this many cards.
OPENING_HAND_SIZE = 7

DEFAULTS = {
    "deck": 60,
    "min": 1,
    "max": 4,
    "mulls": 2,
    "desire": 1,
}

PARAMETER_LABELS = {
    "deck": "Deck Size",
    "min": "Min Copies",
    "max": "Max Copies",
    "mulls": "Max Mulligans",
    "desire": "Desired Copies",
}


class ValidationError(Enum):
    INVALID_RANGE = "Min copies greater than max"
    DECK_TOO_SMALL = "Check deck size"
    INSUFFICIENT_COPIES = "Not enough copies"
    HAND_TOO_LARGE = "Deck smaller than opening hand"

    @property
    def message(self):
        return self.value
