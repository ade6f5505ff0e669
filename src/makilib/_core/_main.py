from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import makilib as mk
        >>> def describe(res: mk.Result[int, str]) -> str:
        ...     return res.map_or_else(lambda v: f"got {v}", lambda e: f"failed: {e}")
        >>>
        >>> mk.Ok(3).into(describe)
        'got 3'
        >>> mk.Err("boom").into(describe)
        'failed: boom'

        ```
        """
        return func(self, *args, **kwargs)
