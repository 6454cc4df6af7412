"""Line comparators used by the sort commands.

Every comparator takes two lines and returns a negative number, zero or a
positive number, like the ``cmp`` functions accepted by
``functools.cmp_to_key``.

The alphabetic comparators approximate a locale collation without touching
process-wide locale state: characters are compared case- and
accent-insensitively first (whitespace and punctuation before digits before
letters), then by accents, then by case with lowercase ahead of uppercase,
and finally by code point so that only identical lines compare equal.
"""

import re
import unicodedata
from typing import Callable

from sorty.sorting.tasks import is_completed_task, task_label


Comparator = Callable[[str, str], int]

_DIGIT_RUN_RE = re.compile(r'(\d+)')

_SYMBOL = 0
_DIGIT = 1
_LETTER = 2


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _base_char(c: str) -> str:
    decomposed = unicodedata.normalize('NFD', c)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold() or c


def _char_class(c: str) -> int:
    if c.isdecimal():
        return _DIGIT
    if c.isalpha():
        return _LETTER
    return _SYMBOL


def _primary(text: str) -> tuple:
    return tuple((_char_class(c), _base_char(c)) for c in text)


def _magnitude(digits: str) -> tuple:
    """Sortable weight of a digit run that orders runs by numeric value."""
    value = ''.join(str(unicodedata.digit(c)) for c in digits).lstrip('0')
    return (len(value), value)


def _numeric_primary(text: str) -> tuple:
    weights = []
    for i, part in enumerate(_DIGIT_RUN_RE.split(text)):
        if i % 2:
            weights.append((_DIGIT, _magnitude(part)))
        else:
            weights.extend(_primary(part))
    return tuple(weights)


def _accents(text: str) -> tuple:
    return tuple(
        ''.join(ch for ch in unicodedata.normalize('NFD', c) if unicodedata.combining(ch))
        for c in text
    )


def _case(text: str) -> tuple:
    return tuple(1 if c.isupper() else 0 for c in text)


def collation_key(text: str) -> tuple:
    return (_primary(text), _accents(text), _case(text), text)


def numeric_collation_key(text: str) -> tuple:
    """Like ``collation_key`` but digit runs weigh by their numeric value."""
    return (_numeric_primary(text), _accents(text), _case(text), text)


def alpha(a: str, b: str) -> int:
    return _cmp(collation_key(a), collation_key(b))


def reverse_alpha(a: str, b: str) -> int:
    return alpha(b, a)


def numeric(a: str, b: str) -> int:
    return _cmp(numeric_collation_key(a), numeric_collation_key(b))


def reverse_numeric(a: str, b: str) -> int:
    return numeric(b, a)


def tasks(a: str, b: str) -> int:
    """Compare task labels, ignoring indentation and completion marker."""
    return alpha(task_label(a), task_label(b))


def tasks_by_completion(a: str, b: str) -> int:
    """Incomplete lines (plain lines included) before completed tasks.

    Lines with the same status compare equal, so their relative order comes
    from the stable sort that uses this comparator.
    """
    return _cmp(is_completed_task(a), is_completed_task(b))
