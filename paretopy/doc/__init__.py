"""Doc trees, combinators and sample documents."""

from paretopy.doc.combinators import call, group, hang, hsep, indent, intersperse, vcat
from paretopy.doc.debug import DocStats, doc_label, doc_stats, doc_to_string
from paretopy.doc.model import (
    EMPTY,
    Choice,
    Concat,
    Doc,
    Flush,
    Text,
    children,
    choice,
    concat,
    flush,
    text,
)
from paretopy.doc.samples import example_doc, random_doc, small_example_doc

__all__ = [
    "EMPTY",
    "Choice",
    "Concat",
    "Doc",
    "DocStats",
    "Flush",
    "Text",
    "call",
    "children",
    "choice",
    "concat",
    "doc_label",
    "doc_stats",
    "doc_to_string",
    "example_doc",
    "flush",
    "group",
    "hang",
    "hsep",
    "indent",
    "intersperse",
    "random_doc",
    "small_example_doc",
    "text",
    "vcat",
]
