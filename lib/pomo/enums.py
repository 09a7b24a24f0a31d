# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Enumerations used in the pomo modules."""

__all__ = [
    'ByteOrder',
    'DirectiveKind',
    'LineKind',
    'ParserState',
    ]

from lazr.enum import (
    EnumeratedType,
    Item,
    )


class ByteOrder(EnumeratedType):
    """Byte order of a compiled MO file, as told by its magic number."""

    LITTLE_ENDIAN = Item("""
        Little endian

        The magic number reads 0xde120495 byte by byte.
        """)

    BIG_ENDIAN = Item("""
        Big endian

        The magic number reads 0x950412de byte by byte.
        """)


class LineKind(EnumeratedType):
    """Kind of a line in a PO file.

    Listed in the order lines are tested for.
    """

    BLANK = Item("""
        Blank

        An empty or whitespace-only line.  Ignored.
        """)

    COMMENT = Item("""
        Comment

        A line whose first non-space character is '#'.
        """)

    DIRECTIVE = Item("""
        Directive

        A line starting with a keyword such as msgid or msgstr[1].
        """)

    CONTINUATION = Item("""
        Continuation

        A bare string that continues the last directive's value.
        """)


class DirectiveKind(EnumeratedType):
    """The PO keywords the parser understands."""

    MSGID = Item("""
        msgid

        The singular source string.
        """)

    MSGID_PLURAL = Item("""
        msgid_plural

        The plural source string.
        """)

    MSGSTR = Item("""
        msgstr

        The translation of a singular entry.
        """)

    MSGSTR_PLURAL = Item("""
        msgstr[N]

        The translation for plural case N.
        """)


class ParserState(EnumeratedType):
    """State of the entry a `TextCatalogParser` is building."""

    AWAITING_DIRECTIVE = Item("""
        Awaiting directive

        A fresh entry: neither comments nor directives seen yet.
        """)

    COLLECTING_COMMENT = Item("""
        Collecting comment

        The last line added to the entry was a comment.
        """)

    ACCUMULATING_VALUE = Item("""
        Accumulating value

        The last line was a directive or a continuation string; further
        continuation strings are appended to the same slot.
        """)
