"""Check which Rust `Option`/`Result` methods have a Python equivalent."""

from collections.abc import Callable
from typing import Any

import rich
import rich.table

import makilib as mk

RESULT_FN = {
    "and",
    "and_then",
    "err",
    "expect",
    "expect_err",
    "inspect",
    "inspect_err",
    "is_err",
    "is_err_and",
    "is_ok",
    "is_ok_and",
    "iter",
    "map",
    "map_err",
    "map_or",
    "map_or_else",
    "ok",
    "or",
    "or_else",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_default",
    "unwrap_or_else",
}

OPTION_FN = {
    "and",
    "and_then",
    "expect",
    "filter",
    "is_none",
    "is_some",
    "iter",
    "map",
    "map_or",
    "ok_or",
    "or",
    "or_else",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
    "xor",
}

RENAMED = {
    "and": "and_",  # reserved word in Python
    "or": "or_",
    "iter": "to_sequence",  # Result only, Option keeps `iter`
}
"""Methods whose Python name differs from the Rust one."""

NOT_PERTINENT = frozenset({"unwrap_or_default"})
"""Methods that rely on Rust traits with no Python counterpart."""

DELIBERATELY_MISSING = {mk.Option: frozenset({"expect", "unwrap"})}
"""Methods left out on purpose: an `Option` payload is only reached through `match` or a fallback."""


def _decorated(fn: Callable[..., Any]) -> Callable[..., Any]:
    if isinstance(fn, (staticmethod, classmethod)):
        return fn.__func__  # type: ignore[return-value]
    return fn


def _python_fns(dtype: type) -> frozenset[str]:
    return frozenset(
        getattr(_decorated(fn), "__name__", "")
        for cls in dtype.mro()
        for fn in cls.__dict__.values()
        if callable(fn) or isinstance(fn, (staticmethod, classmethod))
    )


def _status(dtype: type, rust_fn: str, python_fns: frozenset[str]) -> str:
    if rust_fn in NOT_PERTINENT:
        return "[dim]not pertinent[/dim]"
    if rust_fn in DELIBERATELY_MISSING.get(dtype, frozenset()):
        return "[yellow]left out[/yellow]"
    if rust_fn in python_fns:
        return "[green]ok[/green]"
    renamed = RENAMED.get(rust_fn)
    if renamed is not None and renamed in python_fns:
        return f"[green]ok[/green] (as `{renamed}`)"
    return "[red]missing[/red]"


def main(dtype: type, rust_fns: set[str]) -> None:
    """Print a table of the Rust methods of **dtype** and their Python status."""
    python_fns = _python_fns(dtype)
    table = rich.table.Table(title=f"{dtype.__name__}: Rust parity")
    table.add_column("fn")
    table.add_column("status")
    for rust_fn in sorted(rust_fns):
        table.add_row(rust_fn, _status(dtype, rust_fn, python_fns))
    rich.print(table)
    extra = sorted(
        fn
        for fn in python_fns - rust_fns - set(RENAMED.values())
        if not fn.startswith("_")
    )
    rich.print(f"Python only: {', '.join(extra)}")


if __name__ == "__main__":
    main(mk.Result, RESULT_FN)
    main(mk.Option, OPTION_FN)
