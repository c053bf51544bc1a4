"""Scales mapping raw attribute values to pixels, radii and opacity.

None of the scales clamp: a value outside the domain extrapolates along the
same line. Every scale accepts a float or a numpy array.
"""
from __future__ import annotations

from typing import Dict, Tuple

import numpy as np

import params


class LinearScale:
    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def _transform(self, v):
        return v

    def __call__(self, value):
        d0, d1 = (self._transform(d) for d in self.domain)
        r0, r1 = self.range
        t = self._transform(value)
        if d1 == d0:
            # degenerate domain maps everything to the middle of the range
            return (r0 + r1) / 2 + 0 * t
        return r0 + (t - d0) / (d1 - d0) * (r1 - r0)

    def __repr__(self):
        return f"{type(self).__name__}(domain={self.domain}, range={self.range})"


class SqrtScale(LinearScale):
    """Square-root scale: area, not radius, grows linearly with the value."""

    def _transform(self, v):
        return np.sign(v) * np.sqrt(np.abs(v))


def position_scale(variant: Dict, width: int = params.CHART_WIDTH, margin: Dict = params.MARGIN) -> LinearScale:
    return LinearScale(variant["x_domain"], (margin["left"], width - margin["right"]))


def size_scale(variant: Dict) -> LinearScale:
    cls = SqrtScale if variant.get("size_scale") == "sqrt" else LinearScale
    return cls(variant["size_domain"], variant["size_range"])


def opacity_scale(variant: Dict) -> LinearScale:
    return LinearScale(variant.get("opacity_domain", (0, 20)), variant.get("opacity_range", (0.3, 1)))


def opacity_for(value: float, scale: LinearScale, threshold: float) -> float:
    v = abs(value)
    if v > threshold:
        return 1.0
    return float(scale(v))
