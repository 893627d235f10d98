# src/ellermaze/mapgen/sets.py
# Set-label bookkeeping for one row of Eller's algorithm.
# A label tags columns already connected by some path; labels live in [0, width).

from typing import Dict, List

UNASSIGNED = -1


def relabel(labels: List[int], old: int, new: int) -> None:
    """Union by relabeling: every column tagged `old` becomes `new`."""
    for c, label in enumerate(labels):
        if label == old:
            labels[c] = new


def group_columns(labels: List[int]) -> Dict[int, List[int]]:
    """label -> columns carrying it, groups ordered by their first column."""
    groups: Dict[int, List[int]] = {}
    for c, label in enumerate(labels):
        groups.setdefault(label, []).append(c)
    return groups


def fill_unassigned(labels: List[int]) -> None:
    """
    Give every UNASSIGNED column the smallest label no other column uses,
    scanning upward from zero. Mutates `labels` in place.
    """
    width = len(labels)
    used = [False] * width
    for label in labels:
        if label != UNASSIGNED:
            used[label] = True
    nxt = 0
    for c in range(width):
        if labels[c] != UNASSIGNED:
            continue
        while used[nxt]:
            nxt += 1
        labels[c] = nxt
        nxt += 1
