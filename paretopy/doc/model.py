"""Doc tree: the four layout primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

_LINE_BREAKS: Final[frozenset[str]] = frozenset("\n\r")


@dataclass(frozen=True, slots=True)
class Text:
    """A literal run of characters on a single line."""

    s: str

    def __post_init__(self):
        if any(ch in _LINE_BREAKS for ch in self.s):
            raise ValueError("Text cannot contain line breaks; use Flush to break lines")


@dataclass(frozen=True, slots=True)
class Flush:
    """Render child, then break the line back to the column the flush began at."""

    doc: Doc


@dataclass(frozen=True, slots=True)
class Concat:
    """Children laid out in order, each starting where the previous one ended."""

    docs: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Choice:
    """Two alternative layouts of the same content."""

    a: Doc
    b: Doc


type Doc = Text | Flush | Concat | Choice

EMPTY: Final[Text] = Text("")


def text(s: str) -> Doc:
    return Text(s)


def flush(d: Doc) -> Doc:
    return Flush(d)


def concat(*docs: Doc) -> Doc:
    """Concatenate documents, flattening nested concats.

    Zero documents give the empty text, one document is returned as is.
    """
    flat: list[Doc] = []
    for d in docs:
        if isinstance(d, Concat):
            flat.extend(d.docs)
        else:
            flat.append(d)
    if not flat:
        return EMPTY
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def choice(a: Doc, b: Doc) -> Doc:
    return Choice(a, b)


def children(d: Doc) -> tuple[Doc, ...]:
    """Direct sub-documents of a node, in document order."""
    if isinstance(d, Text):
        return ()
    if isinstance(d, Flush):
        return (d.doc,)
    if isinstance(d, Concat):
        return d.docs
    return (d.a, d.b)
