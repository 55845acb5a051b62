"""
Small mapping and sequence helpers shared by the curve routines.

None of these mutate their inputs; each returns a fresh container.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional


def map_values(fn: Callable[[Any], Any], mapping: Mapping) -> Dict:
    """Apply *fn* to every value of *mapping*, keeping the keys."""
    return {k: fn(v) for k, v in mapping.items()}


def filter_values(pred: Callable[[Any], bool], mapping: Mapping) -> Dict:
    """Keep the entries of *mapping* whose value satisfies *pred*."""
    return {k: v for k, v in mapping.items() if pred(v)}


def group_by(key: Callable[[Any], Hashable], items: Iterable) -> Dict[Hashable, List]:
    """
    Group *items* by ``key(item)``.

    Groups appear in order of first occurrence and keep the input order of
    their members.
    """
    groups: Dict[Hashable, List] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def min_by(key: Callable[[Any], Any], items: Iterable) -> Optional[Any]:
    """
    Element of *items* with the smallest ``key``; the first one wins ties.

    Returns None for an empty iterable.
    """
    return min(items, key=key, default=None)


def max_by(key: Callable[[Any], Any], items: Iterable) -> Optional[Any]:
    """Element of *items* with the largest ``key``; the first one wins ties."""
    return max(items, key=key, default=None)
