"""Boolean predicate trees over element status.

Tooltip ``show`` / ``hide`` directives are small trees::

    {"or": ["highlighted", "selected"]}
    {"and": ["unhighlighted", {"or": ["unselected", "highlighted"]}]}

Leaves come from a closed vocabulary; ``and`` / ``or`` combine lists of
sub-trees. A bare list means ``and``, and a mapping with several operators
requires all of them.
"""

from __future__ import annotations

__all__ = ["LEAVES", "OPERATORS", "element_status", "evaluate_predicate"]

from collections.abc import Mapping
from typing import Any

from stackplot.errors import ConfigurationValueError

LEAVES: tuple[str, ...] = ("highlighted", "unhighlighted", "selected", "unselected")
OPERATORS: tuple[str, ...] = ("and", "or")


def element_status(highlighted: bool, selected: bool) -> dict[str, bool]:
    """Build the leaf -> truth table for one element."""
    return {
        "highlighted": highlighted,
        "unhighlighted": not highlighted,
        "selected": selected,
        "unselected": not selected,
    }


def evaluate_predicate(tree: Any, status: Mapping[str, bool]) -> bool:
    """Evaluate ``tree`` against an element's ``status`` table.

    Raises:
        ConfigurationValueError: on an unknown leaf or operator.
    """
    if isinstance(tree, str):
        if tree not in LEAVES:
            raise ConfigurationValueError(
                f"Unknown predicate {tree!r}; expected one of {', '.join(LEAVES)}"
            )
        return bool(status.get(tree, False))
    if isinstance(tree, (list, tuple)):
        return bool(tree) and all(evaluate_predicate(sub, status) for sub in tree)
    if isinstance(tree, Mapping):
        if not tree:
            return False
        results = []
        for operator, operands in tree.items():
            if operator not in OPERATORS:
                raise ConfigurationValueError(
                    f"Unknown predicate operator {operator!r}; expected 'and' or 'or'"
                )
            if isinstance(operands, (str, Mapping)):
                operands = [operands]
            if operator == "and":
                results.append(all(evaluate_predicate(sub, status) for sub in operands))
            else:
                results.append(any(evaluate_predicate(sub, status) for sub in operands))
        return all(results)
    if tree is None:
        return False
    raise ConfigurationValueError(f"Unsupported predicate node {tree!r}")
