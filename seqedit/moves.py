"""
seqedit.moves — Rewrite Delete/Insert pairs on equal values as Moves.

The search only ever produces Insert, Delete and Substitute.  When the
same value is deleted at one source position and inserted at a target
position, the pair really describes a relocation:

    edits("garvey", "avery")
        search:  [Delete('g', 0), Delete('r', 2), Insert('r', 3)]
        reduced: [Delete('g', 0), Move('r', 2, 3)]

PAIRING
    For each value, the k-th Delete (in list order) pairs with the k-th
    Insert of an equal value.  Each step takes part in at most one Move,
    so no Move is ever emitted twice and the reduced script replays to
    the same result as the unreduced one.

PLACEMENT
    The Move takes the list position of whichever step of its pair comes
    first.  Substitutes and unpaired steps keep their relative order.
"""

import logging
from typing import Any, Iterator, Sequence

from .steps import Delete, EditStep, Insert, Move


logger = logging.getLogger(__name__)


class _ValueIndex:
    """List positions of steps, grouped by equality of their values."""

    def __init__(self):
        self._hashed: dict[Any, list[int]] = {}
        # unhashable values (lists, dicts, ...) fall back to an equality scan
        self._unhashed: list[tuple[Any, list[int]]] = []

    def add(self, value: Any, position: int) -> None:
        try:
            bucket = self._hashed.setdefault(value, [])
        except TypeError:
            bucket = self._scan(value, create=True)
        bucket.append(position)

    def get(self, value: Any) -> list[int]:
        try:
            return self._hashed.get(value, [])
        except TypeError:
            return self._scan(value, create=False)

    def _scan(self, value: Any, create: bool) -> list[int]:
        for key, positions in self._unhashed:
            if key == value:
                return positions
        positions: list[int] = []
        if create:
            self._unhashed.append((value, positions))
        return positions

    def items(self) -> Iterator[tuple[Any, list[int]]]:
        yield from self._hashed.items()
        yield from self._unhashed


def _pair_positions(script: Sequence[EditStep]) -> dict[int, int]:
    """Map the list position of every paired step to its partner's."""
    deletes = _ValueIndex()
    inserts = _ValueIndex()
    for position, step in enumerate(script):
        if isinstance(step, Delete):
            deletes.add(step.value, position)
        elif isinstance(step, Insert):
            inserts.add(step.value, position)

    partners: dict[int, int] = {}
    for value, delete_positions in deletes.items():
        for d, i in zip(delete_positions, inserts.get(value)):
            partners[d] = i
            partners[i] = d
    return partners


def reduce_moves(script: Sequence[EditStep]) -> list[EditStep]:
    """
    Collapse matching Delete/Insert pairs of `script` into Moves.

    Returns a new list; `script` is not modified.
    """
    partners = _pair_positions(script)
    if not partners:
        return list(script)

    reduced: list[EditStep] = []
    for position, step in enumerate(script):
        partner = partners.get(position)
        if partner is None:
            reduced.append(step)
            continue
        if partner < position:
            # already emitted at the partner's position
            continue
        other = script[partner]
        delete, insert = (step, other) if isinstance(step, Delete) else (other, step)
        reduced.append(Move(insert.value, delete.index, insert.index))

    logger.debug("move reduction: %d steps -> %d (%d moves)",
                 len(script), len(reduced), len(partners) // 2)
    return reduced
