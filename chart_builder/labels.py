"""Pick which bubbles carry a text label.

A label set is the union of
  - a static top-N by the reference attribute, computed once per chart, and
  - a dynamic top-K by the active attribute (plus, on signed data, the K most
    negative values), recomputed whenever the active attribute changes.

All rankings use a stable sort over a copy of the points, so equal values
keep their file order and the caller's list is never reordered.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Tuple

import params
import utils


def ranked_identifiers(points: List[Dict[str, Any]], key: str, count: int,
                       ascending: bool = False, magnitude: bool = False) -> List[str]:
    def sort_key(p):
        v = utils.value_of(p, key)
        if magnitude:
            v = abs(v)
        return v if ascending else -v

    ranked = sorted(points, key=sort_key)
    return [p[params.ID_KEY] for p in ranked[:max(count, 0)]]


def static_labels(points: List[Dict[str, Any]], key: str = params.REFERENCE_KEY,
                  count: int = params.STATIC_LABEL_COUNT, magnitude: bool = False) -> FrozenSet[str]:
    return frozenset(ranked_identifiers(points, key, count, magnitude=magnitude))


def dynamic_labels(points: List[Dict[str, Any]], key: str, count: int = params.DYNAMIC_LABEL_COUNT,
                   signed: bool = False) -> Tuple[FrozenSet[str], FrozenSet[str]]:
    """Return (top, bottom); bottom is empty unless the data is signed."""
    top = frozenset(ranked_identifiers(points, key, count))
    bottom: FrozenSet[str] = frozenset()
    if signed:
        bottom = frozenset(ranked_identifiers(points, key, count, ascending=True))
    return top, bottom


def compute_labels(points: List[Dict[str, Any]], active_key: str, static_set: FrozenSet[str],
                   count: int = params.DYNAMIC_LABEL_COUNT, signed: bool = False) -> FrozenSet[str]:
    top, bottom = dynamic_labels(points, active_key, count=count, signed=signed)
    return frozenset(static_set) | top | bottom


def label_texts(points: List[Dict[str, Any]], label_set: FrozenSet[str]) -> Dict[str, str]:
    # Unlabelled points keep an empty string so every bubble has a text slot
    return {p[params.ID_KEY]: (p[params.ID_KEY] if p[params.ID_KEY] in label_set else "") for p in points}
