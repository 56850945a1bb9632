"""
seqedit.steps — Typed edit steps.

An edit script is a list of these values, in application order.

Index conventions:
    Delete.index         position in the SOURCE sequence
    Insert.index         position in the TARGET sequence
    Substitute.index     position in the TARGET sequence
    Move.from_index      position in the SOURCE sequence
    Move.to_index        position in the TARGET sequence

Replaying a script therefore means: remove every deleted (or moved-out)
source position first, then apply insertions, substitutions and move
targets in ascending target index.  See `seqedit.core.apply_edits`.
"""

from dataclasses import dataclass
from typing import Any, ClassVar


class EditStep:
    """Base class for edit steps.  Not instantiated directly."""
    __slots__ = ()

    kind: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Insert(EditStep):
    """Insert `value` so that it ends up at target position `index`."""
    value: Any
    index: int

    kind: ClassVar[str] = "insert"

    def __repr__(self) -> str:
        return f"Insert({self.value!r}, {self.index})"


@dataclass(frozen=True, slots=True)
class Delete(EditStep):
    """Delete `value`, found at source position `index`."""
    value: Any
    index: int

    kind: ClassVar[str] = "delete"

    def __repr__(self) -> str:
        return f"Delete({self.value!r}, {self.index})"


@dataclass(frozen=True, slots=True)
class Substitute(EditStep):
    """Replace the element at target position `index` with `value`."""
    value: Any
    index: int

    kind: ClassVar[str] = "substitute"

    def __repr__(self) -> str:
        return f"Substitute({self.value!r}, {self.index})"


@dataclass(frozen=True, slots=True)
class Move(EditStep):
    """
    Relocate `value` from source position `from_index` to target
    position `to_index`.

    Never produced by the search itself: `seqedit.moves.reduce_moves`
    synthesizes it from a Delete/Insert pair on equal values.
    """
    value: Any
    from_index: int
    to_index: int

    kind: ClassVar[str] = "move"

    def __repr__(self) -> str:
        return f"Move({self.value!r}, {self.from_index}, {self.to_index})"
