"""Top-level package for the UNO simulator and text buffer."""

from . import cards, game, presenter, rules, state, texteditor
from .game import UnoGame
from .texteditor import TextEditor

__all__ = [
    "cards",
    "game",
    "presenter",
    "rules",
    "state",
    "texteditor",
    "UnoGame",
    "TextEditor",
]
