"""Sample documents for demos, benchmarks and scaling checks."""

from __future__ import annotations

import random

from paretopy.doc.combinators import call, group
from paretopy.doc.model import Doc, text

_WORDS: tuple[str, ...] = (
    "alpha",
    "beta",
    "gamma",
    "delta",
    "x",
    "y",
    "item",
    "value",
    '"hello"',
    "42",
)

_NAMES: tuple[str, ...] = ("f", "g", "map", "render", "div", "li", "apply")


def small_example_doc() -> Doc:
    """``group(["a", group(["b", "c"])])``."""
    return group([text("a"), group([text("b"), text("c")])])


def example_doc() -> Doc:
    """A nested call expression in the shape of a tiny UI tree."""
    return call(
        "render",
        [
            call(
                "div",
                [
                    call("h1", [text('"Hello"')]),
                    call("p", [text('"This is a pretty printer demo"')]),
                    call(
                        "ul",
                        [
                            call("li", [text('"item 1"')]),
                            call("li", [text('"item 2"')]),
                        ],
                    ),
                ],
            )
        ],
    )


def random_doc(seed: int, size: int) -> Doc:
    """A reproducible document of roughly `size` leaves built from calls and groups."""
    rng = random.Random(seed)
    return _random_doc(rng, max(size, 1))


def _random_doc(rng: random.Random, budget: int) -> Doc:
    if budget <= 1:
        return text(rng.choice(_WORDS))

    arity = rng.randint(2, min(4, budget))
    shares = _split(rng, budget - 1, arity)
    items = [_random_doc(rng, share) for share in shares]
    if rng.random() < 0.5:
        return call(rng.choice(_NAMES), items)
    return group(items)


def _split(rng: random.Random, total: int, parts: int) -> list[int]:
    cuts = sorted(rng.randint(0, total) for _ in range(parts - 1))
    bounds = [0, *cuts, total]
    return [max(hi - lo, 1) for lo, hi in zip(bounds, bounds[1:])]
