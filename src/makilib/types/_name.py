from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Self, final

import cytoolz as cz
import more_itertools as mit

from .._results import Err, Ok, Result
from ._string_type import (
    StringType,
    check_max_length,
    check_min_length,
    check_not_null,
)

MIN_LENGTH: Final = 2
MAX_LENGTH: Final = 50
ALPHABET: Final = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz1234567890 _-"
BOUNDARY_FORBIDDEN: Final = frozenset(" _-")
"""Characters allowed inside a name, but not as its first or last character."""

_ALPHABET_ERROR: Final = f"Name must only contain the following characters [{ALPHABET}]."


def _uses_valid_alphabet(source: str) -> bool:
    return (
        mit.first_true(source, pred=lambda char: char not in ALPHABET) is None
        and cz.itertoolz.first(source) not in BOUNDARY_FORBIDDEN
        and cz.itertoolz.last(source) not in BOUNDARY_FORBIDDEN
    )


def _check_alphabet(source: str) -> Result[str, str]:
    if _uses_valid_alphabet(source):
        return Ok(source)
    return Err(_ALPHABET_ERROR)


@final
@dataclass(slots=True, frozen=True, init=False)
class Name(StringType):
    """A short human readable name.

    Between 2 and 50 characters, made of ASCII letters, digits, spaces, hyphens and underscores.
    It can neither start nor end with a space, a hyphen or an underscore.

    Example:
    ```python
    >>> from makilib.types import Name
    >>> Name.parse("Deep Thought").map(Name.as_string)
    Ok(value='Deep Thought')
    >>> Name.parse("x")
    Err(error='Name must be at least 2 characters in length.')
    >>> Name.parse("-dash").is_err()
    True

    ```
    """

    _value: str

    @classmethod
    def parse(cls, source: str | None) -> Result[Self, str]:
        """Validate `source`, returning the wrapped value or the first rule it breaks."""
        return (
            check_not_null(cls.__name__, source)
            .and_then(check_min_length(cls.__name__, MIN_LENGTH))
            .and_then(check_max_length(cls.__name__, MAX_LENGTH))
            .and_then(_check_alphabet)
            .map(cls._from_valid)
        )

    def as_string(self) -> str:
        """Returns the validated text."""
        return self._value
