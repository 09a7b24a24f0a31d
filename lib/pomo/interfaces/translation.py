# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interface for a single translation catalog entry."""

__all__ = [
    'ITranslationEntry',
    ]

from zope.interface import (
    Attribute,
    Interface,
    )


class ITranslationEntry(Interface):
    """A logical msgid/msgstr pair, with its comments."""

    source = Attribute(
        "The msgid of the entry: a string, or a (singular, plural) tuple "
        "for plural entries.  None until something is written to it.")
    target = Attribute(
        "The msgstr of the entry: a string, or a list of plural form "
        "translations indexed by plural case.  Plural cases that were never "
        "written are None.  None until something is written to it.")
    comment = Attribute(
        "The human-written comment block of the entry, one line per "
        "'#' line without the '#', or None.")
    plural = Attribute(
        "True if either the source or the target is in plural form.")
    complete = Attribute(
        "True when both the source and the target have been written.")
    fuzzy = Attribute(
        "True if the comment block holds a ', fuzzy' marker line.  "
        "Setting it adds or removes that line.")

    def add_text(text, to):
        """Append text to one of the entry's slots.

        :param text: The string to append.
        :param to: The slot name: 'source', 'source_plural', 'target',
            'target[N]' for plural case N, or 'comment'.
        :raise ValueError: if `to` is not a known slot name.
        """

    def to_dict():
        """Return the source, target and comment as a dict.

        Slots that were never written are left out.
        """
