"""
Emoji record and qualification status types

Information in this package is derived from Unicode Technical Standard #51
("Unicode Emoji"): https://unicode.org/reports/tr51/
"""

from enum import IntEnum
from typing import NamedTuple


class Status(IntEnum):
    """
    Qualification status of an emoji sequence.

    FULLY_QUALIFIED emojis must be processed as emojis, MINIMALLY_QUALIFIED
    and UNQUALIFIED ones may or may not be.
    """

    # Not intended for independent output, has no fully-qualified form
    # (skin tones, hair styles)
    COMPONENT = 0

    # Unambiguously intended for emoji presentation. Input devices should
    # only emit these.
    FULLY_QUALIFIED = 1

    # First character is qualified, the full sequence is not
    MINIMALLY_QUALIFIED = 2

    # Mostly characters that predate the emoji standard and were
    # categorized as emojis retroactively
    UNQUALIFIED = 3


class EmojiRecord(NamedTuple):
    sequence: str
    name: str
    status: Status
    introduced: str
    # Sequence of the fully-qualified emoji with the same name, empty if none
    fully_qualifies_as: str
    group: str = ""
    subgroup: str = ""


EMPTY_RECORD = EmojiRecord("", "", Status.COMPONENT, "", "")
