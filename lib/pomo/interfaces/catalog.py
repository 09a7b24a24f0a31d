# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interfaces and exceptions for reading and writing translation catalogs."""

__all__ = [
    'CatalogError',
    'CatalogSyntaxWarning',
    'FormatError',
    'IBinaryCatalogDecoder',
    'ITextCatalogParser',
    'ITextCatalogSerializer',
    'ParseError',
    ]

from zope.interface import (
    Attribute,
    Interface,
    )


class CatalogError(Exception):
    """Base class for translation catalog errors."""

    def __init__(self, lno=None, msg=None):
        super(CatalogError, self).__init__(lno, msg)
        self.lno = lno
        self.msg = msg

    def __str__(self):
        if self.msg and self.lno is not None:
            return '%s on line %d' % (self.msg, self.lno)
        elif self.msg:
            return self.msg
        elif self.lno is None:
            return 'catalog error on an unknown line'
        else:
            return 'catalog error on line %d' % self.lno


class FormatError(CatalogError):
    """A binary (MO) catalog could not be decoded."""

    def __init__(self, msg=None):
        super(FormatError, self).__init__(msg=msg)

    def __str__(self):
        if self.msg:
            return 'MO file: %s' % self.msg
        return 'MO file: invalid binary format'


class ParseError(CatalogError):
    """Syntax error in a text (PO) catalog."""

    def __str__(self):
        if self.msg:
            return super(ParseError, self).__str__()
        if self.lno is None:
            return 'PO file: syntax error on an unknown line'
        else:
            return 'PO file: syntax error on line %d' % self.lno


class CatalogSyntaxWarning(Warning):
    """Syntax warning in a catalog.

    These are never raised, only logged.
    """

    def __init__(self, lno=None, msg=None):
        super(CatalogSyntaxWarning, self).__init__(lno, msg)
        self.lno = lno
        self.msg = msg

    def __str__(self):
        if self.msg and self.lno is not None:
            return '%s (line %d)' % (self.msg, self.lno)
        elif self.msg:
            return self.msg
        elif self.lno is None:
            return 'catalog: syntax warning on unknown line'
        else:
            return 'catalog: syntax warning on line %d' % self.lno


class IBinaryCatalogDecoder(Interface):
    """Reads compiled (MO) catalogs into translation entries."""

    translations = Attribute(
        "The list of `ITranslationEntry` decoded so far.")
    header = Attribute(
        "The `MOHeader` of the last decoded catalog, or None.")
    charset = Attribute(
        "The charset declared in the catalog's Content-Type metadata, or "
        "None when it has not been declared.")
    nplurals = Attribute(
        "The number of plural forms declared in the Plural-Forms metadata, "
        "as a string.")
    plural = Attribute(
        "The plural form selection expression declared in the Plural-Forms "
        "metadata, as an opaque string.")

    def decode(data):
        """Decode a binary catalog and add its entries to `translations`.

        Entries equal to one already in `translations` are not added
        again.

        :param data: A bytes object or a binary file-like object.
        :raise `FormatError`: if the data is not a valid catalog.  In that
            case `translations` is left untouched.
        :return: `translations`.
        """


class ITextCatalogParser(Interface):
    """Line oriented parser for PO text catalogs."""

    translations = Attribute(
        "The list of complete `ITranslationEntry` parsed so far.")
    state = Attribute(
        "The `ParserState` of the entry under construction.")
    line_number = Attribute(
        "The 1-based number of the last line handed to parse_line().")

    def parse(text):
        """Parse a whole PO file and add its entries to `translations`.

        :raise `ParseError`: on malformed input.
        :return: `translations`.
        """

    def parse_line(line):
        """Parse a single line of a PO file."""

    def finish():
        """Indicate that the PO data has come to an end.

        Stores the entry under construction if it is complete; incomplete
        entries are dropped.
        """


class ITextCatalogSerializer(Interface):
    """Renders translation entries as a PO text catalog."""

    translations = Attribute(
        "The sequence of `ITranslationEntry` to render.")

    def to_text():
        """Return the PO text for `translations`.

        When several entries share a source, only the last one is
        rendered.
        """

    def format_text(text):
        """Return `text` quoted as a PO string literal."""
