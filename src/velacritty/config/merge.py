"""Deep merge of generic configuration trees.

Merge policy:
    - table + table: recursive merge per key
    - anything else: the overlay replaces the base wholesale

Arrays are never concatenated and a scalar overlay may replace a whole
table (and vice versa). Inputs are never mutated.
"""

from copy import deepcopy
from datetime import date, datetime, time


TreeValue = (
    None
    | bool
    | int
    | float
    | str
    | datetime
    | date
    | time
    | list["TreeValue"]
    | dict[str, "TreeValue"]
)


def merge(base: TreeValue, overlay: TreeValue) -> TreeValue:
    """Merge ``overlay`` on top of ``base``.

    Args:
        base: Lower precedence tree.
        overlay: Higher precedence tree.

    Returns:
        A new tree. Keys only present in one table pass through; keys
        present in both are merged recursively with the overlay winning.
    """
    if not isinstance(base, dict) or not isinstance(overlay, dict):
        return deepcopy(overlay)

    result: dict[str, TreeValue] = deepcopy(base)
    for key, value in overlay.items():
        if key in result:
            result[key] = merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


def merge_all(trees: list[TreeValue]) -> dict[str, TreeValue]:
    """Fold trees left to right so later entries take precedence.

    Args:
        trees: Trees in ascending precedence.

    Returns:
        The merged table; an empty table for no input.
    """
    merged: TreeValue = {}
    for tree in trees:
        merged = merge(merged, tree)
    return merged if isinstance(merged, dict) else {}
