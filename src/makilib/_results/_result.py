from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Never, cast, final

from .._core import Pipeable
from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from typing import TypeIs


class ResultUnwrapError[T](RuntimeError):
    """Raised when a `Result` is forcibly unwrapped on the wrong variant.

    Carries the payload of the variant that was actually present, so the caller can still inspect it.

    Attributes:
        value: The offending payload (the error when `Ok` was expected, the value when `Err` was expected).
        msg: The message given by the caller, or the default one.
    """

    value: T
    msg: str

    def __init__(self, value: T, msg: str) -> None:
        super().__init__(value, msg)
        self.value = value
        self.msg = msg

    def __str__(self) -> str:
        return f"{self.msg}: {self.value!r}"


class Result[T, E](Pipeable, ABC):
    """A successful value of type `T`, or a failure value of type `E`.

    The only variants are `Ok` and `Err`.

    Only `expect`, `unwrap`, `expect_err` and `unwrap_err` can raise; every other method is total.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err. The exception carries the error in its `value` attribute.

        Example:
            ```python
            >>> from makilib import Ok
            >>> Ok(2).expect("should be a number")
            2

            ```

        Equivalent to Rust's Result::expect().
        """
        ...

    @abstractmethod
    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg: The message to display if the result is Ok.

        Returns:
            The contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok. The exception carries the Ok value in its `value` attribute.

        Equivalent to Rust's Result::expect_err().
        """
        ...

    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Prefer `match`, `map_or_else` or `unwrap_or` when the Err case can actually happen.

        Example:
            ```python
            >>> from makilib import Err
            >>> Err("emergency failure").unwrap()
            Traceback (most recent call last):
                ...
            makilib._results._result.ResultUnwrapError: called `unwrap` on an `Err` value: 'emergency failure'

            ```

        Equivalent to Rust's Result::unwrap().
        """
        return self.expect("called `unwrap` on an `Err` value")

    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Equivalent to Rust's Result::unwrap_err().
        """
        return self.expect_err("called `unwrap_err` on an `Ok` value")

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        """
        Eliminates the result, calling exactly one of the two callbacks.

        Args:
            on_ok: Called with the Ok value.
            on_err: Called with the Err value.

        Returns:
            The result of the called function.

        Raises:
            RuntimeError: If `self` is neither `Ok` nor `Err`, which can only happen if the closed set of variants was broken.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(3).match(lambda x: f"ok {x}", lambda e: f"err {e}")
            'ok 3'
            >>> Err("nope").match(lambda x: f"ok {x}", lambda e: f"err {e}")
            'err nope'

            ```
        """
        match self:
            case Ok(value):
                return on_ok(value)
            case Err(error):
                return on_err(error)
            case _:
                msg = f"unreachable: {type(self).__name__} is not a Result variant"
                raise RuntimeError(msg)

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """
        Returns True if the result is Ok and the value inside of it matches a predicate.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(2).is_ok_and(lambda x: x > 1)
            True
            >>> Ok(0).is_ok_and(lambda x: x > 1)
            False
            >>> Err("hey").is_ok_and(lambda x: x > 1)
            False

            ```
        """
        return self.match(pred, lambda _: False)

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """
        Returns True if the result is Err and the error inside of it matches a predicate.
        """
        return self.match(lambda _: False, pred)

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(2).ok()
            Some(value=2)
            >>> Err("Nothing here").ok()
            NONE

            ```
        """
        return self.match(Some, lambda _: NONE)

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE.
        """
        return self.match(lambda _: NONE, Some)

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        An Err is returned as the very same object, `f` is never called on it.

        Args:
            f: Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise Err(error).

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok("line").map(str.upper)
            Ok(value='LINE')
            >>> Err(404).map(str.upper)
            Err(error=404)

            ```
        """
        if self.is_ok():
            return Ok(f(self.value))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Args:
            f: Callable to apply to the Err value.

        Returns:
            Result[T, F]: Err(f(error)) if Err, otherwise Ok(value).

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Err(13).map_err(lambda code: f"error code: {code}")
            Err(error='error code: 13')
            >>> Ok(2).map_err(lambda code: f"error code: {code}")
            Ok(value=2)

            ```
        """
        if self.is_err():
            return Err(f(self.error))
        return cast(Result[T, F], self)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Returns the provided default if Err, or applies a function to the contained value if Ok.

        The default is evaluated by the caller before the call, whichever the variant.
        Use `map_or_else` when computing it is expensive or has side effects.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok("foo").map_or(42, len)
            3
            >>> Err("bar").map_or(42, len)
            42

            ```
        """
        return self.match(f, lambda _: default)

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Maps a Result[T, E] to U by applying `ok` to a contained Ok value, or `err` to a contained Err value.

        Only the callback matching the variant is called.

        Args:
            ok: Callable to handle the Ok value.
            err: Callable to handle the Err value.

        Returns:
            The result of the called function.

        Equivalent to Rust's Result::map_or_else()
        """
        return self.match(ok, err)

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """
        Calls `f` with the contained value if Ok, then returns the result unchanged.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(4).inspect(lambda x: print(f"original: {x}")).map(lambda x: x ** 3)
            original: 4
            Ok(value=64)
            >>> Err("bad").inspect(print)
            Err(error='bad')

            ```
        """
        if self.is_ok():
            f(self.value)
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """
        Calls `f` with the contained error if Err, then returns the result unchanged.
        """
        if self.is_err():
            f(self.error)
        return self

    def to_sequence(self) -> Iterator[T]:
        """
        Returns an iterator over the possibly contained value.

        The iterator yields the Ok value once, or nothing if Err.
        Each call starts a new iterator, and a `Result` can itself be iterated any number of times.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> list(Ok(5).to_sequence())
            [5]
            >>> list(Err("nothing!").to_sequence())
            []

            ```
        """
        match self:
            case Ok(value):
                yield value
            case _:
                return

    def __iter__(self) -> Iterator[T]:
        return self.to_sequence()

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """
        Returns `other` if the result is Ok, otherwise returns the Err of self.

        `other` is evaluated by the caller before the call, whichever the variant.
        Use `and_then` to only build the next result when self is Ok.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(2).and_(Err("late error"))
            Err(error='late error')
            >>> Err("early error").and_(Ok("foo"))
            Err(error='early error')
            >>> Ok(2).and_(Ok("different result type"))
            Ok(value='different result type')

            ```
        """
        if self.is_ok():
            return other
        return cast(Result[U, E], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns Err.

        Args:
            f: Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E]: The result of f(value) if Ok, otherwise Err(error).

        Example:
            ```python
            >>> from makilib import Ok, Err, Result
            >>> def half(x: int) -> Result[int, str]:
            ...     return Ok(x // 2) if x % 2 == 0 else Err(f"{x} is odd")
            >>> Ok(8).and_then(half).and_then(half)
            Ok(value=2)
            >>> Ok(6).and_then(half).and_then(half)
            Err(error='3 is odd')

            ```

        Equivalent to Rust's Result::and_then().
        """
        if self.is_ok():
            return f(self.value)
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Calls f if the result is Err, otherwise returns the Ok value of self.

        Equivalent to Rust's Result::or_else().
        """
        if self.is_err():
            return f(self.error)
        return cast(Result[T, F], self)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(9).unwrap_or(2)
            9
            >>> Err("error").unwrap_or(2)
            2

            ```
        """
        return self.match(lambda value: value, lambda _: default)

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the error.

        Example:
            ```python
            >>> from makilib import Ok, Err
            >>> Ok(2).unwrap_or_else(len)
            2
            >>> Err("foo").unwrap_or_else(len)
            3

            ```
        """
        return self.match(lambda value: value, f)


@final
@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Always returns True for Ok."""
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Always returns False for Ok."""
        return False

    def expect(self, msg: str) -> T:
        """Returns the contained value, `msg` is unused."""
        return self.value

    def expect_err(self, msg: str) -> Never:
        """Raises ResultUnwrapError carrying the Ok value."""
        raise ResultUnwrapError(self.value, msg)


@final
@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Always returns False for Err."""
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Always returns True for Err."""
        return True

    def expect(self, msg: str) -> Never:
        """Raises ResultUnwrapError carrying the error."""
        raise ResultUnwrapError(self.error, msg)

    def expect_err(self, msg: str) -> E:
        """Returns the contained error, `msg` is unused."""
        return self.error
