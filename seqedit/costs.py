"""
seqedit.costs — Cost functions for the edit-script search.

A cost function maps an Insert, Delete or Substitute step to a
non-negative integer.  The search calls it many times per step, so it
must be pure and deterministic; negative, non-integer or non-terminating
cost functions give undefined results.  It is never called with a Move.
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterable

from .steps import Delete, EditStep, Insert, Move, Substitute


CostFunction = Callable[[EditStep], int]


def uniform_cost(step: EditStep) -> int:
    """Every step costs 1.  This is plain Levenshtein alignment."""
    return 1


def _check_weight(name: str, weight: object) -> None:
    # bool is a subclass of int, but True/False are never meant as weights
    if type(weight) is bool or not isinstance(weight, int):
        raise ValueError(f"{name} cost must be an int, got {weight!r}")
    if weight < 0:
        raise ValueError(f"{name} cost must be non-negative, got {weight}")


@dataclass(frozen=True)
class CostModel:
    """
    Per-kind step weights, usable anywhere a CostFunction is expected.

        >>> expensive_sub = CostModel(substitute=3)
        >>> expensive_sub(Substitute("d", 1))
        3

    Raising `substitute` above `insert + delete` makes the search prefer
    an insert/delete pair over a substitution.
    """
    insert: int = 1
    delete: int = 1
    substitute: int = 1

    def __post_init__(self):
        _check_weight("insert", self.insert)
        _check_weight("delete", self.delete)
        _check_weight("substitute", self.substitute)

    def __call__(self, step: EditStep) -> int:
        if isinstance(step, Insert):
            return self.insert
        if isinstance(step, Delete):
            return self.delete
        if isinstance(step, Substitute):
            return self.substitute
        if isinstance(step, Move):
            raise TypeError("Move steps are not costed; cost the underlying Delete and Insert")
        raise TypeError(f"Not an edit step: {step!r}")

    def with_costs(self, **weights: int) -> "CostModel":
        """Return a copy with some weights replaced."""
        return replace(self, **weights)


def script_cost(script: Iterable[EditStep], cost_fn: CostFunction = uniform_cost) -> int:
    """
    Total cost of a script under `cost_fn`.

    A Move is charged as the Delete and Insert it replaced, so the cost
    of a reduced script equals the cost the search minimized.
    """
    total = 0
    for step in script:
        if isinstance(step, Move):
            total += cost_fn(Delete(step.value, step.from_index))
            total += cost_fn(Insert(step.value, step.to_index))
        else:
            total += cost_fn(step)
    return total
