from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

import cytoolz as cz

from .._results import Err, Ok, Result


class StringType(ABC):
    """Base class for string wrappers whose instances are only built through validation.

    Subclasses override `parse` to validate the raw text, and implement `as_string` to give it back.

    A subclass that does not override `parse` can never be built through it: the default implementation always fails.

    Example:
    ```python
    >>> from makilib.types import StringType
    >>> class Raw(StringType):
    ...     def as_string(self) -> str:
    ...         return ""
    >>> Raw.parse("anything")
    Err(error='parse not implemented for type Raw')

    ```
    """

    __slots__ = ()

    @classmethod
    def parse(cls, source: str | None) -> Result[Self, str]:
        """Validate `source` and wrap it, or return the reason it was rejected."""
        return Err(f"parse not implemented for type {cls.__name__}")

    @classmethod
    def _from_valid(cls, source: str) -> Self:
        # Subclasses are dataclasses without __init__, storing the text in `_value`.
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", source)
        return instance

    @abstractmethod
    def as_string(self) -> str:
        """Returns the validated text."""
        ...

    def __str__(self) -> str:
        return self.as_string()


def check_not_null(type_name: str, source: str | None) -> Result[str, str]:
    """Reject a missing `source`."""
    if source is None:
        return Err(f"{type_name} cannot be null.")
    return Ok(source)


@cz.functoolz.curry
def check_min_length(type_name: str, limit: int, source: str) -> Result[str, str]:
    """Reject a `source` shorter than `limit` characters."""
    if len(source) < limit:
        return Err(f"{type_name} must be at least {limit} characters in length.")
    return Ok(source)


@cz.functoolz.curry
def check_max_length(type_name: str, limit: int, source: str) -> Result[str, str]:
    """Reject a `source` longer than `limit` characters."""
    if len(source) > limit:
        return Err(f"{type_name} must not be more than {limit} characters in length.")
    return Ok(source)
