"""Derived combinators. Everything here expands to Text/Flush/Concat/Choice."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from paretopy.doc.model import EMPTY, Doc, choice, concat, flush, text


def intersperse(sep: Doc, items: Iterable[Doc]) -> list[Doc]:
    out: list[Doc] = []
    first = True
    for item in items:
        if first:
            first = False
        else:
            out.append(sep)
        out.append(item)
    return out


def hsep(items: Iterable[Doc], sep: str = " ") -> Doc:
    """All items on one line, separated by `sep`."""
    return concat(*intersperse(text(sep), items)) if sep else concat(*items)


def vcat(items: Iterable[Doc]) -> Doc:
    """One item per line, every item starting at the same column."""
    parts = list(items)
    if not parts:
        return EMPTY
    return concat(*(flush(item) for item in parts[:-1]), parts[-1])


def group(items: Sequence[Doc], sep: str = " ") -> Doc:
    """Either all items on one line or one item per line."""
    if len(items) <= 1:
        return concat(*items)
    return choice(hsep(items, sep), vcat(items))


def indent(n: int, d: Doc) -> Doc:
    """Shift the whole block right by `n` columns."""
    if n <= 0:
        return d
    return concat(text(" " * n), d)


def hang(items: Sequence[Doc], n: int = 2, sep: str = " ") -> Doc:
    """Like `group`, but the vertical form indents every item after the first."""
    if len(items) <= 1:
        return concat(*items)
    vertical = vcat([items[0], *(indent(n, item) for item in items[1:])])
    return choice(hsep(items, sep), vertical)


def call(
    name: str,
    args: Sequence[Doc],
    *,
    left: str = "(",
    right: str = ")",
    sep: str = ",",
) -> Doc:
    """A delimited call expression.

    The horizontal form is ``name(a, b)``. The vertical form stacks the
    arguments, each aligned right after the opening delimiter::

        name(a,
             b)
    """
    head = text(name + left)
    tail = text(right)
    if not args:
        return concat(head, tail)

    horizontal = concat(head, *intersperse(text(sep + " "), args), tail)
    if len(args) == 1:
        return horizontal

    stacked = [concat(arg, text(sep)) for arg in args[:-1]]
    stacked.append(args[-1])
    vertical = concat(head, vcat(stacked), tail)
    return choice(horizontal, vertical)
