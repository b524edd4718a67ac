"""Replay a candidate's choices against a doc tree to produce text."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from paretopy.doc import Choice, Concat, Doc, Flush, Text


class _ChoiceCursor:
    """Read position into one choice path, confined to a single render call."""

    def __init__(self, choices: Sequence[bool]) -> None:
        self._choices = choices
        self._index = 0

    def take(self) -> bool:
        if self._index >= len(self._choices):
            raise ValueError(
                f"Choice path exhausted after {self._index} picks; "
                "it was not produced for this document"
            )
        pick = self._choices[self._index]
        self._index += 1
        return pick

    def finish(self) -> None:
        if self._index != len(self._choices):
            raise ValueError(
                f"Choice path has {len(self._choices) - self._index} unused picks; "
                "it was not produced for this document"
            )


@dataclass(frozen=True, slots=True)
class _Break:
    """Pending line break, padding the new line up to `column`."""

    column: int


def render_lines(doc: Doc, choices: Sequence[bool]) -> list[str]:
    """Render `doc` into lines, taking one pick from `choices` per Choice visited.

    A Flush that starts at column c pads the next line with c spaces, which is
    the tetris join: the right layout's later lines are indented by the width
    of the left layout's last line.
    """
    cursor = _ChoiceCursor(choices)
    lines: list[str] = [""]
    stack: list[Doc | _Break] = [doc]

    while stack:
        match stack.pop():
            case _Break(column=column):
                lines.append(" " * column)

            case Text(s=s):
                lines[-1] += s

            case Flush(doc=inner):
                stack.append(_Break(len(lines[-1])))
                stack.append(inner)

            case Concat(docs=docs):
                # push in reverse so first part is processed first
                stack.extend(reversed(docs))

            case Choice(a=a, b=b):
                stack.append(a if cursor.take() else b)

    cursor.finish()
    return lines


def render(doc: Doc, choices: Sequence[bool]) -> str:
    return "\n".join(render_lines(doc, choices))
