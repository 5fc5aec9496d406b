"""Whole-string emoji lookup over the generated table"""

from types import MappingProxyType

from .emoji_data import EMOJI_TABLE as _EMOJI_TABLE
from .emoji_data import VERSION
from .record import EMPTY_RECORD, EmojiRecord

__all__ = ["EMOJI_TABLE", "VERSION", "is_emoji", "lookup"]

EMOJI_TABLE = MappingProxyType(_EMOJI_TABLE)


def lookup(s: str) -> tuple[EmojiRecord, bool]:
    """
    Find information about a single emoji.

    The input is matched in its entirety, so a string holding two emojis
    (or an emoji plus anything else) is never found. Only RGI emojis, their
    minimally-qualified and unqualified variants, and emoji components that
    require emoji presentation are in the table.

    Returns the record and True on a hit, EMPTY_RECORD and False otherwise.
    """
    record = EMOJI_TABLE.get(s)
    if record is None:
        return EMPTY_RECORD, False
    return record, True


def is_emoji(s: str) -> bool:
    return s in EMOJI_TABLE
