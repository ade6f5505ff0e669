from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, final

from .._core import Pipeable

if TYPE_CHECKING:
    from typing import TypeIs

    from ._result import Result


class Option[T](Pipeable, ABC):
    """A value of type `T`, or nothing.

    The only variants are `Some` and `NoneOption` (exposed through the `NONE` singleton).

    There is no `unwrap` on an `Option`: the payload is reached through `match`, or through one of the total fallbacks (`unwrap_or`, `unwrap_or_else`).
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some(2).is_some()
            True
            >>> NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is the `NONE` value.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """
        Eliminates the option, calling exactly one of the two callbacks.

        Args:
            on_some: Called with the contained value if `Some`.
            on_none: Called without arguments if `NONE`.

        Returns:
            The result of the called function.

        Raises:
            RuntimeError: If `self` is neither `Some` nor `NoneOption`, which can only happen if the closed set of variants was broken.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some(3).match(lambda x: x * 2, lambda: 0)
            6
            >>> NONE.match(lambda x: x * 2, lambda: 0)
            0

            ```
        """
        match self:
            case Some(value):
                return on_some(value)
            case NoneOption():
                return on_none()
            case _:
                msg = f"unreachable: {type(self).__name__} is not an Option variant"
                raise RuntimeError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `NONE`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.match(lambda value: value, lambda: default)

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.match(lambda value: value, f)

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `NONE` value untouched.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        return self.match(lambda value: Some(f(value)), lambda: NONE)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `NONE`.

        Example:
            ```python
            >>> from makilib import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> Some(2).and_then(nope).and_then(sq)
            NONE

            ```
        """
        return self.match(f, lambda: NONE)

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some("barbarians").or_else(lambda: Some("vikings"))
            Some(value='barbarians')
            >>> NONE.or_else(lambda: Some("vikings"))
            Some(value='vikings')

            ```
        """
        return self.match(lambda _: self, f)

    def ok_or[E](self, error: E) -> Result[T, E]:
        """
        Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `NONE` to `Err(error)`.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> Some("foo").ok_or(0)
            Ok(value='foo')
            >>> NONE.ok_or(0)
            Err(error=0)

            ```
        """
        from ._result import Err, Ok

        return self.match(Ok, lambda: Err(error))

    def iter(self) -> Iterator[T]:
        """
        Returns an iterator over the possibly contained value.

        Example:
            ```python
            >>> from makilib import Some, NONE
            >>> list(Some(4).iter())
            [4]
            >>> list(NONE.iter())
            []

            ```
        """
        match self:
            case Some(value):
                yield value
            case _:
                return

    def __iter__(self) -> Iterator[T]:
        return self.iter()


@final
@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Example:
    ```python
    >>> import makilib as mk
    >>> mk.Some(42)
    Some(value=42)

    ```
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` for `Some`."""
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `False` for `Some`."""
        return False


@final
@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        """Returns `False` for `NONE`."""
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` for `NONE`."""
        return True


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
