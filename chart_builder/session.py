from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Optional

import params
import utils
from .io_utils import attribute_keys
from .labels import static_labels, compute_labels, label_texts
from .layout import LayoutDriver, TickCallback
from .scales import position_scale, size_scale, opacity_scale, opacity_for


class ChartSession:
    """One bubble chart: its points, scales, active key, labels and layout.

    The active key lives here rather than in module state; the label
    selector and the layout driver only ever see it through this object.
    Rendering surfaces read ``label_text``, ``styles`` and the point
    positions, and route hover events through ``on_point_enter`` and
    ``on_point_leave``.
    """

    def __init__(self, points: List[Dict[str, Any]], variant: str = "share",
                 width: int = params.CHART_WIDTH, height: int = params.CHART_HEIGHT,
                 margin: Dict[str, int] = params.MARGIN,
                 static_count: int = params.STATIC_LABEL_COUNT,
                 dynamic_count: int = params.DYNAMIC_LABEL_COUNT,
                 seed: Optional[int] = None, on_tick: Optional[TickCallback] = None,
                 initial_key: str = params.REFERENCE_KEY):
        self.variant_name = variant
        self.variant = params.CHART_VARIANTS[variant]
        self.signed = bool(self.variant.get("signed"))
        self.points = points
        self.width = width
        self.height = height
        self.margin = margin
        self.dynamic_count = dynamic_count
        self.keys = attribute_keys(points)
        self._by_id = {p[params.ID_KEY]: p for p in points}

        self.x_scale = position_scale(self.variant, width, margin)
        self.size = size_scale(self.variant)
        self.opacity = opacity_scale(self.variant)

        # fixed for the life of the chart
        self.static_labels: FrozenSet[str] = static_labels(
            points, params.REFERENCE_KEY, static_count, magnitude=self.signed)

        self.active_key: Optional[str] = None
        self.labels: FrozenSet[str] = frozenset()
        self.label_text: Dict[str, str] = {}
        self.styles: Dict[str, Dict[str, Any]] = {
            p[params.ID_KEY]: self._resting_style(p) for p in points
        }

        self.layout = LayoutDriver(points, target_y=height / 2,
                                   x_strength=self.variant["x_strength"],
                                   y_strength=self.variant["y_strength"],
                                   padding=params.COLLIDE_PADDING, seed=seed, on_tick=on_tick)
        if initial_key not in self.keys:
            raise ValueError(f"Initial attribute key {initial_key!r} is not in the data")
        self.select(initial_key)

    # --- encodings -------------------------------------------------------

    def radius(self, point: Dict[str, Any]) -> float:
        # size always follows the reference key, whatever drives position
        return float(self.size(abs(utils.value_of(point, params.REFERENCE_KEY))))

    def target_x(self, point: Dict[str, Any]) -> float:
        return self.target_x_for(point, self.active_key)

    def target_x_for(self, point: Dict[str, Any], key: str) -> float:
        return float(self.x_scale(utils.value_of(point, key)))

    def fill(self, point: Dict[str, Any]) -> str:
        if not self.signed or self.active_key is None:
            return self.variant.get("fill", self.variant.get("positive_fill"))
        return utils.sign_fill(utils.value_of(point, self.active_key), self.variant_name)

    def fill_opacity(self, point: Dict[str, Any]) -> float:
        if not self.signed or self.active_key is None:
            return 1.0
        return opacity_for(utils.value_of(point, self.active_key), self.opacity,
                           self.variant["opacity_threshold"])

    def _resting_style(self, point: Dict[str, Any]) -> Dict[str, Any]:
        return {"fill": self.fill(point), "fill_opacity": self.fill_opacity(point),
                "stroke": None, "stroke_width": 0}

    # --- interaction -----------------------------------------------------

    def select(self, key: str) -> bool:
        """Make ``key`` the active attribute; unknown keys are ignored."""
        if key not in self.keys:
            print(f"Warning: unknown attribute key {key!r}; expected one of {', '.join(self.keys)}")
            return False
        self.active_key = key

        self.labels = compute_labels(self.points, key, self.static_labels,
                                     count=self.dynamic_count, signed=self.signed)
        self.label_text = label_texts(self.points, self.labels)

        if self.signed:
            self.styles = {p[params.ID_KEY]: self._resting_style(p) for p in self.points}

        self.layout.interrupt()
        self.layout.restart(self.target_x, self.radius)
        return True

    def settle(self, max_ticks: Optional[int] = None) -> int:
        return self.layout.run(max_ticks)

    def on_point_enter(self, identifier: str) -> Dict[str, Any]:
        """Tooltip contents and highlight style for a hovered bubble."""
        p = self._by_id[identifier]
        key = self.active_key
        raw = p.get(key)
        style = dict(self.styles[identifier])
        if self.signed:
            value = utils.pct_str(utils.value_of(p, key), signed=True)
            style.update(stroke="#000", stroke_width=2)
        else:
            value = utils.pct_str(raw)
            style.update(fill=self.variant["hover_fill"], stroke="#333", stroke_width=1)
        overall = utils.pct_str(p.get(params.REFERENCE_KEY))
        return {
            "source": identifier,
            "title": identifier,
            "lines": [
                f"{utils.display_name(key, self.variant_name)}: {value}",
                f"({self.variant['reference_label']}: {overall})",
            ],
            "style": style,
        }

    def on_point_leave(self, identifier: str) -> Dict[str, Any]:
        return dict(self.styles[identifier])

    def snapshot(self) -> List[Dict[str, Any]]:
        out = []
        for p in self.points:
            ident = p[params.ID_KEY]
            style = self.styles[ident]
            out.append({
                "source": ident,
                "x": p["x"],
                "y": p["y"],
                "r": self.radius(p),
                "label": self.label_text.get(ident, ""),
                "fill": style["fill"],
                "fill_opacity": style["fill_opacity"],
            })
        return out
