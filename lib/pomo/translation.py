# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""The translation entry model shared by the MO and PO components."""

__all__ = [
    'TranslationEntry',
    'unique_translations',
    ]

import re

from zope.interface import implementer

from pomo.interfaces.translation import ITranslationEntry


FUZZY_MARKER = ', fuzzy'
FUZZY_PATTERN = re.compile(r'^,\s*fuzzy\s*$')

_plural_target_slot = re.compile(r'^target\[(\d+)\]$')


def _concat(value, text):
    """Append text to value, treating None as nothing written yet."""
    if value is None:
        return text
    return value + text


@implementer(ITranslationEntry)
class TranslationEntry:
    r"""One msgid/msgstr pair of a catalog.

    Slots are filled incrementally with `add_text`, which appends to what
    is already there:

    >>> entry = TranslationEntry()
    >>> entry.complete
    False
    >>> entry.add_text('Axis', to='source')
    >>> entry.add_text('Axes', to='source_plural')
    >>> entry.add_text('Achsen', to='target[1]')
    >>> entry.source, entry.target
    (('Axis', 'Axes'), [None, 'Achsen'])
    >>> entry.plural, entry.complete
    (True, True)

    The comment takes no part in comparisons:

    >>> other = TranslationEntry(
    ...     source=('Axis', 'Axes'), target=[None, 'Achsen'],
    ...     comment='reviewed\n')
    >>> entry == other
    True
    """

    def __init__(self, source=None, target=None, comment=None):
        self.source = source
        self.target = target
        self.comment = comment

    def __repr__(self):
        return '<%s source=%r target=%r>' % (
            self.__class__.__name__, self.source, self.target)

    def __eq__(self, other):
        if not ITranslationEntry.providedBy(other):
            return NotImplemented
        return (self.source, self.target) == (other.source, other.target)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def add_text(self, text, to):
        """See `ITranslationEntry`."""
        if to == 'source':
            if isinstance(self.source, tuple):
                self.source = (
                    (_concat(self.source[0], text), ) + self.source[1:])
            else:
                self.source = _concat(self.source, text)
        elif to == 'source_plural':
            if isinstance(self.source, tuple):
                singular = self.source[0]
                plural = self.source[1] if len(self.source) > 1 else None
            else:
                singular, plural = self.source, None
            self.source = (singular, _concat(plural, text))
        elif to == 'target':
            if isinstance(self.target, list):
                self._add_plural_target(0, text)
            else:
                self.target = _concat(self.target, text)
        elif to == 'comment':
            self.comment = _concat(self.comment, text)
        else:
            match = _plural_target_slot.match(to)
            if match is None:
                raise ValueError('Unknown translation slot: %r' % (to, ))
            self._add_plural_target(int(match.group(1)), text)

    def _add_plural_target(self, index, text):
        if self.target is None:
            self.target = []
        elif not isinstance(self.target, list):
            # A singular msgstr followed by msgstr[N]: it becomes case 0.
            self.target = [self.target]
        while len(self.target) <= index:
            self.target.append(None)
        self.target[index] = _concat(self.target[index], text)

    @property
    def complete(self):
        """See `ITranslationEntry`."""
        return self.source is not None and self.target is not None

    @property
    def plural(self):
        """See `ITranslationEntry`."""
        return isinstance(self.source, tuple) or isinstance(self.target, list)

    @property
    def singular_source(self):
        if isinstance(self.source, tuple):
            return self.source[0] if self.source else None
        return self.source

    @property
    def plural_source(self):
        """The msgid_plural, or the msgid for a singular source."""
        if isinstance(self.source, tuple):
            return self.source[1] if len(self.source) > 1 else None
        return self.source

    @property
    def targets(self):
        """The target as a list of plural cases, whatever its form."""
        if self.target is None:
            return []
        if isinstance(self.target, list):
            return list(self.target)
        return [self.target]

    def _get_fuzzy(self):
        if not self.comment:
            return False
        return any(
            FUZZY_PATTERN.match(line)
            for line in self.comment.splitlines())

    def _set_fuzzy(self, value):
        if value:
            if self.fuzzy:
                return
            comment = self.comment or ''
            if comment and not comment.endswith('\n'):
                comment += '\n'
            self.comment = comment + FUZZY_MARKER + '\n'
        elif self.comment is not None:
            self.comment = ''.join(
                line + '\n' for line in self.comment.splitlines()
                if not FUZZY_PATTERN.match(line))

    fuzzy = property(_get_fuzzy, _set_fuzzy)

    def strip(self):
        """Strip surrounding whitespace from every line of source and target.

        Each element of a plural source or target is stripped on its own.
        """
        self.source = _strip_value(self.source)
        self.target = _strip_value(self.target)

    def to_dict(self):
        """See `ITranslationEntry`."""
        fields = (
            ('source', self.source),
            ('target', self.target),
            ('comment', self.comment),
            )
        return dict(
            (name, value) for name, value in fields if value is not None)


def _strip_value(value):
    if value is None:
        return None
    elif isinstance(value, tuple):
        return tuple(_strip_value(part) for part in value)
    elif isinstance(value, list):
        return [_strip_value(part) for part in value]
    return '\n'.join(line.strip() for line in value.split('\n')).strip()


def unique_translations(translations):
    """Drop entries whose source appears again later in the sequence.

    The survivors keep the position of their last occurrence.

    >>> entries = [
    ...     TranslationEntry('one', '1'),
    ...     TranslationEntry('two', '2'),
    ...     TranslationEntry('one', '001'),
    ...     ]
    >>> [entry.target for entry in unique_translations(entries)]
    ['2', '001']
    """
    last_seen = {}
    for index, translation in enumerate(translations):
        last_seen[translation.source] = index
    return [
        translation for index, translation in enumerate(translations)
        if last_seen[translation.source] == index]
