from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Self, final

from .._results import Result
from ._string_type import StringType, check_max_length, check_not_null

MAX_LENGTH: Final = 300


@final
@dataclass(slots=True, frozen=True, init=False)
class Description(StringType):
    """Free text of at most 300 characters. The empty string is a valid description."""

    _value: str

    @classmethod
    def parse(cls, source: str | None) -> Result[Self, str]:
        """Validate `source`, returning the wrapped value or the first rule it breaks."""
        return (
            check_not_null(cls.__name__, source)
            .and_then(check_max_length(cls.__name__, MAX_LENGTH))
            .map(cls._from_valid)
        )

    def as_string(self) -> str:
        """Returns the validated text."""
        return self._value
