# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Decoding of compiled gettext (MO) catalogs.

An MO file starts with a magic number that also tells the byte order, a
fixed header, and two tables of (length, offset) pairs pointing at the
original and translated strings.  The hash table is never used: entries
are read by walking the string tables in order.
"""

__all__ = [
    'BinaryCatalogDecoder',
    'decode_binary',
    'MOHeader',
    ]

from collections import namedtuple
import io
import logging
import re
import struct

from zope.interface import implementer

from pomo.config import config
from pomo.enums import ByteOrder
from pomo.interfaces.catalog import (
    CatalogSyntaxWarning,
    FormatError,
    IBinaryCatalogDecoder,
    )
from pomo.translation import TranslationEntry


log = logging.getLogger('pomo.mofile')

MAGIC_LITTLE_ENDIAN = b'\xde\x12\x04\x95'
MAGIC_BIG_ENDIAN = b'\x95\x04\x12\xde'

_struct_prefixes = {
    ByteOrder.LITTLE_ENDIAN: '<',
    ByteOrder.BIG_ENDIAN: '>',
    }

# Original and translated strings of plural entries hold all their forms,
# separated by NUL.
PLURAL_SEPARATOR = '\x00'

_content_type = re.compile(r'^Content-Type:', re.IGNORECASE)
_charset = re.compile(r'charset=((?:\w|-)+)', re.IGNORECASE)
_plural_forms = re.compile(
    r'^Plural-Forms:\s*nplurals\s*=\s*(\d+);\s*plural\s*=\s*([^;]*)\n?')


MOHeader = namedtuple('MOHeader', [
    'magic',
    'byte_order',
    'revision',
    'count',
    'original_table_offset',
    'translated_table_offset',
    'hash_table_size',
    'hash_table_offset',
    # The following are only present with revision 1.
    'sysdep_segment_count',
    'sysdep_segments_offset',
    'sysdep_string_count',
    'original_sysdep_table_offset',
    'translated_sysdep_table_offset',
    ])


def _read(stream, size, what):
    """Read exactly size bytes, or raise `FormatError`."""
    data = stream.read(size)
    if len(data) != size:
        raise FormatError(
            'unexpected end of file reading %s (wanted %d bytes, got %d)'
            % (what, size, len(data)))
    return data


def _seek(stream, offset, what):
    if offset > _stream_length(stream):
        raise FormatError(
            'offset %d of %s is beyond the end of the file' % (offset, what))
    stream.seek(offset)


def _stream_length(stream):
    position = stream.tell()
    length = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return length


@implementer(IBinaryCatalogDecoder)
class BinaryCatalogDecoder:
    """Reads MO catalogs into a list of `TranslationEntry`.

    Repeated calls to `decode` accumulate into the same list; entries equal
    to one already present are skipped.
    """

    def __init__(self, translations=None):
        if translations is None:
            translations = []
        self.translations = translations
        self.header = None
        self.charset = None
        self.nplurals = str(config.mofile.default_nplurals)
        self.plural = str(config.mofile.default_plural)

    def decode(self, data):
        """See `IBinaryCatalogDecoder`."""
        if isinstance(data, (bytes, bytearray)):
            stream = io.BytesIO(data)
        else:
            stream = data
        header = self._read_header(stream)
        pairs = self._read_strings(stream, header)

        decoded = []
        for original, translated in pairs:
            if not original:
                self._read_metadata(translated)
            entry = self._make_entry(original, translated)
            if entry in self.translations or entry in decoded:
                log.debug('Skipping duplicate entry %r.', entry.source)
                continue
            decoded.append(entry)

        self.header = header
        self.translations.extend(decoded)
        return self.translations

    def _read_header(self, stream):
        magic = _read(stream, 4, 'magic number')
        if magic == MAGIC_LITTLE_ENDIAN:
            byte_order = ByteOrder.LITTLE_ENDIAN
        elif magic == MAGIC_BIG_ENDIAN:
            byte_order = ByteOrder.BIG_ENDIAN
        else:
            raise FormatError('unrecognized signature %r' % magic)
        prefix = _struct_prefixes[byte_order]

        fields = struct.unpack(prefix + '6I', _read(stream, 24, 'header'))
        revision = fields[0]
        if revision == 1:
            sysdep_fields = struct.unpack(
                prefix + '5I', _read(stream, 20, 'revision 1 header'))
            log.warning(CatalogSyntaxWarning(
                msg='MO file revision 1: system dependent strings are '
                    'ignored'))
        elif revision > 1:
            raise FormatError(
                'unsupported revision %d' % revision)
        else:
            sysdep_fields = (None, ) * 5

        header = MOHeader(magic, byte_order, *(fields + sysdep_fields))
        log.debug(
            'MO header: %s, revision %d, %d strings.',
            byte_order.name, header.revision, header.count)
        return header

    def _read_table(self, stream, header, offset, what):
        prefix = _struct_prefixes[header.byte_order]
        _seek(stream, offset, what)
        size = 8 * header.count
        values = struct.unpack(
            '%s%dI' % (prefix, 2 * header.count), _read(stream, size, what))
        # Pairs of (length, offset).
        return list(zip(values[0::2], values[1::2]))

    def _read_strings(self, stream, header):
        """Return the list of (original, translated) strings."""
        originals = self._read_table(
            stream, header, header.original_table_offset,
            'original strings table')
        translations = self._read_table(
            stream, header, header.translated_table_offset,
            'translated strings table')
        pairs = []
        for index in range(header.count):
            original = self._read_string(
                stream, originals[index], 'original string %d' % index)
            translated = self._read_string(
                stream, translations[index], 'translated string %d' % index)
            pairs.append((original, translated))
        return pairs

    def _read_string(self, stream, table_entry, what):
        length, offset = table_entry
        _seek(stream, offset, what)
        data = _read(stream, length, what)
        encoding = config.mofile.string_encoding
        try:
            return data.decode(encoding, config.mofile.decode_errors)
        except UnicodeDecodeError as error:
            raise FormatError(
                'could not decode %s as %s: %s' % (what, encoding, error))
        except LookupError:
            raise FormatError('unknown encoding %r' % encoding)

    def _read_metadata(self, text):
        """Pick the charset and plural forms from the header entry."""
        self.charset = None
        nplurals = plural = None
        for line in text.splitlines(True):
            if _content_type.match(line):
                match = _charset.search(line)
                if match is not None:
                    self.charset = match.group(1)
            else:
                match = _plural_forms.match(line)
                if match is not None:
                    nplurals, plural = match.groups()
            if self.charset and nplurals:
                break
        if nplurals is None:
            nplurals = str(config.mofile.default_nplurals)
        if plural is None:
            plural = str(config.mofile.default_plural)
        self.nplurals = nplurals
        self.plural = plural
        log.debug(
            'MO metadata: charset %s, nplurals %s, plural %s.',
            self.charset, self.nplurals, self.plural)

    def _make_entry(self, original, translated):
        if original and (
            PLURAL_SEPARATOR in original or PLURAL_SEPARATOR in translated):
            return TranslationEntry(
                source=tuple(original.split(PLURAL_SEPARATOR)),
                target=translated.split(PLURAL_SEPARATOR))
        return TranslationEntry(source=original, target=translated)


def decode_binary(data):
    """Return the list of `TranslationEntry` in an MO catalog.

    :param data: A bytes object or a binary file-like object.
    :raise `FormatError`: if the data is not a valid MO catalog.
    """
    return BinaryCatalogDecoder().decode(data)
