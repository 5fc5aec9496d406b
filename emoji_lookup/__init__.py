"""
Lookup of emoji metadata from Unicode Technical Standard #51
("Unicode Emoji"): https://unicode.org/reports/tr51/
"""

from .lookup import EMOJI_TABLE, VERSION, is_emoji, lookup
from .record import EMPTY_RECORD, EmojiRecord, Status

__all__ = [
    "EMOJI_TABLE",
    "EMPTY_RECORD",
    "VERSION",
    "EmojiRecord",
    "Status",
    "is_emoji",
    "lookup",
]
