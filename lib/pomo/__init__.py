# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Read and write gettext translation catalogs.

PO text catalogs are parsed with `parse_text` and written with
`serialize_text`; compiled MO catalogs are read with `decode_binary`.  All
three work on lists of `TranslationEntry`.
"""

__all__ = [
    'BinaryCatalogDecoder',
    'CatalogError',
    'decode_binary',
    'FormatError',
    'parse_text',
    'ParseError',
    'serialize_text',
    'TextCatalogParser',
    'TextCatalogSerializer',
    'TranslationEntry',
    'unique_translations',
    ]

from pomo.interfaces.catalog import (
    CatalogError,
    FormatError,
    ParseError,
    )
from pomo.mofile import (
    BinaryCatalogDecoder,
    decode_binary,
    )
from pomo.pofile import (
    parse_text,
    serialize_text,
    TextCatalogParser,
    TextCatalogSerializer,
    )
from pomo.translation import (
    TranslationEntry,
    unique_translations,
    )
