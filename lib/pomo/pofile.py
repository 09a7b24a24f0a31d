# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Parsing and writing of gettext PO text catalogs.

The parser reads a PO file line by line.  Each line is either blank, a
comment, a directive (msgid, msgid_plural, msgstr, msgstr[N]) followed by
a quoted string, or a quoted string continuing the last directive.
"""

__all__ = [
    'classify_line',
    'parse_directive_name',
    'parse_text',
    'serialize_text',
    'TextCatalogParser',
    'TextCatalogSerializer',
    ]

import logging
import re

from zope.interface import implementer

from pomo.config import config
from pomo.enums import (
    DirectiveKind,
    LineKind,
    ParserState,
    )
from pomo.interfaces.catalog import (
    CatalogSyntaxWarning,
    ITextCatalogParser,
    ITextCatalogSerializer,
    ParseError,
    )
from pomo.translation import (
    TranslationEntry,
    unique_translations,
    )


log = logging.getLogger('pomo.pofile')

_comment_line = re.compile(r'^\s*#')
_directive_line = re.compile(r'^\s*([a-z][a-z0-9_\[\]]*)(.*)$')
_quoted_string = re.compile(r'''^['"](.*)['"]$''')
_plural_msgstr = re.compile(r'^msgstr\[(\d+)\]$')
_line_break = re.compile(r'\r\n|\n')

_directive_names = {
    'msgid': DirectiveKind.MSGID,
    'msgid_plural': DirectiveKind.MSGID_PLURAL,
    'msgstr': DirectiveKind.MSGSTR,
    }

# The `TranslationEntry` slot each directive writes to.
_directive_slots = {
    DirectiveKind.MSGID: 'source',
    DirectiveKind.MSGID_PLURAL: 'source_plural',
    DirectiveKind.MSGSTR: 'target',
    DirectiveKind.MSGSTR_PLURAL: 'target[%d]',
    }


def classify_line(line):
    """Return the `LineKind` of a PO file line.

    >>> for line in ['', '#, fuzzy', '  msgstr[1] "x"', '"more"']:
    ...     print(classify_line(line).name)
    BLANK
    COMMENT
    DIRECTIVE
    CONTINUATION
    """
    if not line.strip():
        return LineKind.BLANK
    elif _comment_line.match(line):
        return LineKind.COMMENT
    elif _directive_line.match(line):
        return LineKind.DIRECTIVE
    else:
        return LineKind.CONTINUATION


def parse_directive_name(name):
    """Return the `DirectiveKind` and plural case for a directive name.

    The plural case is None except for msgstr[N].

    >>> kind, case = parse_directive_name('msgstr[2]')
    >>> print(kind.name, case)
    MSGSTR_PLURAL 2
    >>> parse_directive_name('msgctxt')
    Traceback (most recent call last):
    ...
    ValueError: msgctxt
    """
    if name in _directive_names:
        return _directive_names[name], None
    match = _plural_msgstr.match(name)
    if match is None:
        raise ValueError(name)
    return DirectiveKind.MSGSTR_PLURAL, int(match.group(1))


@implementer(ITextCatalogParser)
class TextCatalogParser:
    """Reads PO text into a list of `TranslationEntry`.

    Comments belong to the entry that follows them.  An entry is stored
    once it has both a source and a target and a new one begins, either
    with a comment or a msgid line.  Entries still incomplete at the end
    of the input are dropped.
    """

    def __init__(self, translations=None):
        if translations is None:
            translations = []
        self.translations = translations
        self.line_number = 0
        self._current = None
        self._start_new_translation()

    def _start_new_translation(self):
        self._store_translation()
        self._current = TranslationEntry()
        self._slot = None
        self.state = ParserState.AWAITING_DIRECTIVE

    def _store_translation(self):
        if self._current is not None and self._current.complete:
            # Trailing newlines of multiline strings are removed.
            self._current.strip()
            self.translations.append(self._current)
        self._current = None

    def parse(self, text):
        """See `ITextCatalogParser`."""
        self.line_number = 0
        try:
            for line in _line_break.split(text):
                self.parse_line(line)
        except ParseError:
            # Drop the half-built entry so the next parse starts clean.
            self._current = None
            self._start_new_translation()
            raise
        self.finish()
        return self.translations

    def parse_line(self, line):
        """See `ITextCatalogParser`."""
        self.line_number += 1
        kind = classify_line(line)
        if kind == LineKind.BLANK:
            return
        elif kind == LineKind.COMMENT:
            self._add_comment(line)
        elif kind == LineKind.DIRECTIVE:
            self._parse_directive(line)
        else:
            self._add_continuation(line)

    def finish(self):
        """See `ITextCatalogParser`."""
        if not self._current.complete and self._current.to_dict():
            log.warning(CatalogSyntaxWarning(
                self.line_number,
                'Incomplete entry at end of file was dropped'))
        self._start_new_translation()

    def _add_comment(self, line):
        if self._current.complete:
            self._start_new_translation()
        # Only the first '#' is removed.
        text = line.strip().replace('#', '', 1)
        self._current.add_text(text + '\n', to='comment')
        self.state = ParserState.COLLECTING_COMMENT

    def _parse_directive(self, line):
        name, argument = _directive_line.match(line).groups()
        try:
            kind, plural_case = parse_directive_name(name)
        except ValueError:
            raise ParseError(
                self.line_number, 'no method found for %r' % name)

        if kind == DirectiveKind.MSGID and self._current.complete:
            self._start_new_translation()

        slot = _directive_slots[kind]
        if plural_case is not None:
            slot = slot % plural_case
        self._slot = slot
        self.state = ParserState.ACCUMULATING_VALUE

        if not argument.strip():
            # The string follows on the next line.
            if config.pofile.warn_empty_directive:
                log.warning(CatalogSyntaxWarning(
                    self.line_number,
                    'line has no content; this is not supported by some '
                    'implementations of msgfmt'))
            return
        self._add_string(argument)

    def _add_continuation(self, line):
        if self._slot is None:
            raise ParseError(
                self.line_number,
                'string found before any msgid or msgstr: %r' % line)
        self.state = ParserState.ACCUMULATING_VALUE
        self._add_string(line)

    def _add_string(self, string):
        """Append a quoted string to the slot of the last directive.

        Only the escaped newline is unescaped.
        """
        match = _quoted_string.match(string.strip())
        if match is None:
            raise ParseError(
                self.line_number, 'not string format: %r' % string)
        text = match.group(1).strip().replace('\\n', '\n')
        self._current.add_text(text, to=self._slot)


@implementer(ITextCatalogSerializer)
class TextCatalogSerializer:
    """Renders a sequence of `TranslationEntry` as PO text."""

    def __init__(self, translations):
        self.translations = translations

    def to_text(self):
        """See `ITextCatalogSerializer`."""
        translations = unique_translations(self.translations)
        dropped = len(self.translations) - len(translations)
        if dropped:
            log.debug(
                'Only the last of identical msgids is exported; '
                '%d entries dropped.', dropped)
        return '\n\n'.join(
            self._render_translation(translation)
            for translation in translations)

    def _render_translation(self, translation):
        lines = ['#' + line for line in _comment_lines(translation.comment)]
        if translation.plural:
            lines.append(
                'msgid %s' % self.format_text(translation.singular_source))
            lines.append(
                'msgid_plural %s' % self.format_text(
                    translation.plural_source))
            for index, target in enumerate(translation.targets):
                if target is None:
                    continue
                lines.append(
                    'msgstr[%d] %s' % (index, self.format_text(target)))
        else:
            lines.append('msgid %s' % self.format_text(translation.source))
            lines.append('msgstr %s' % self.format_text(translation.target))
        return '\n'.join(lines)

    @staticmethod
    def format_text(text):
        r"""See `ITextCatalogSerializer`.

        A single line is quoted as it is:

        >>> print(TextCatalogSerializer.format_text('Good morning'))
        "Good morning"

        Several lines start with an empty string, then get one quoted line
        each, ending in an escaped newline:

        >>> print(TextCatalogSerializer.format_text('Good\nMorning'))
        ""
        "Good\n"
        "Morning\n"
        """
        if text is None:
            text = ''
        lines = text.split('\n')
        if not lines[-1]:
            # A final newline does not start another line.
            lines.pop()
        if len(lines) == 1:
            return '"%s"' % text.replace('\n', '\\n')
        formatted = ['""']
        for line in lines:
            formatted.append('"%s\\n"' % line.rstrip())
        return '\n'.join(formatted)


def _comment_lines(comment):
    """Split a comment block into lines, without trailing empty lines."""
    if not comment:
        return []
    lines = _line_break.split(comment)
    while lines and not lines[-1]:
        lines.pop()
    return lines


def parse_text(text):
    """Return the list of `TranslationEntry` in a PO catalog.

    :raise `ParseError`: if the text is malformed.
    """
    return TextCatalogParser().parse(text)


def serialize_text(translations):
    """Return the PO text for a sequence of `TranslationEntry`."""
    return TextCatalogSerializer(translations).to_text()
