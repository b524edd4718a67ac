"""Debug printers and statistics for doc trees."""

from __future__ import annotations

from dataclasses import dataclass

from paretopy.doc.model import Choice, Concat, Doc, Flush, Text, children


def doc_to_string(doc: Doc) -> str:
    """Compact one-line rendering of the tree structure, e.g. ``("a" <|> flush("a") <> "b")``."""
    if isinstance(doc, Text):
        return f'"{doc.s}"'
    if isinstance(doc, Flush):
        return f"flush({doc_to_string(doc.doc)})"
    if isinstance(doc, Concat):
        if not doc.docs:
            return '""'
        return " <> ".join(doc_to_string(d) for d in doc.docs)
    return f"({doc_to_string(doc.a)} <|> {doc_to_string(doc.b)})"


def doc_label(doc: Doc) -> str:
    """Short node label used by traces and frontier trees."""
    if isinstance(doc, Text):
        return f'text("{doc.s}")'
    if isinstance(doc, Flush):
        return "flush"
    if isinstance(doc, Concat):
        return "concat (<>)"
    return "choice (<|>)"


@dataclass(frozen=True, slots=True)
class DocStats:
    nodes: int
    choices: int
    depth: int


def doc_stats(doc: Doc) -> DocStats:
    """Count distinct nodes and choices; a subtree shared by several parents counts once."""
    depths: dict[int, int] = {}
    seen: set[int] = set()
    choices = 0
    stack: list[tuple[Doc, bool]] = [(doc, False)]
    while stack:
        d, expanded = stack.pop()
        if expanded:
            depths[id(d)] = 1 + max((depths[id(child)] for child in children(d)), default=0)
            continue
        if id(d) in seen:
            continue
        seen.add(id(d))
        if isinstance(d, Choice):
            choices += 1
        stack.append((d, True))
        stack.extend((child, False) for child in children(d))
    return DocStats(nodes=len(seen), choices=choices, depth=depths[id(doc)])
