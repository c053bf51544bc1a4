from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import params
import utils
from .config import OUT_DIR, PAGE_NAME, FRAME_EVERY, LAST_UPDATED
from .io_utils import write_text
from .header import make_header, make_controls, make_footer_note
from .session import ChartSession
from .templates import CHART_HTML, CHART_JS


def _round(v: float) -> float:
    return round(float(v), 2)


def _positions(points: List[Dict[str, Any]]) -> List[List[float]]:
    return [[_round(p["x"]), _round(p["y"])] for p in points]


def collect_layouts(session: ChartSession, frame_every: int = FRAME_EVERY) -> Dict[str, Any]:
    """Settle the chart once per attribute key and record the results.

    The initial key is settled first, from the solver's starting spiral, with
    a frame kept every ``frame_every`` ticks so the page can replay the
    bubbles drifting into place. Every other key is then selected in turn and
    settled; each starts from wherever the previous key left the bubbles.
    The session finishes back on its initial key.
    """
    intro: List[List[List[float]]] = []
    first_key = session.active_key

    def record(points):
        if session.layout.ticks % max(frame_every, 1) == 0:
            intro.append(_positions(points))

    session.layout.add_tick_callback(record)
    try:
        session.settle()
    finally:
        session.layout.remove_tick_callback(record)
    intro.append(_positions(session.points))

    layouts: Dict[str, Any] = {}
    for key in [first_key] + [k for k in session.keys if k != first_key]:
        if key != session.active_key:
            session.select(key)
            session.settle()
        layouts[key] = {
            "snapshot": session.snapshot(),
            "tooltips": [session.on_point_enter(p[params.ID_KEY])["lines"] for p in session.points],
            "labels": sorted(session.labels),
        }

    if session.active_key != first_key:
        session.select(first_key)
        session.settle()
    return {"initial_key": first_key, "intro": intro, "layouts": layouts}


def axis_ticks(session: ChartSession) -> List[Dict[str, Any]]:
    return [{"value": v, "x": _round(session.x_scale(v)), "label": f"{v}%"}
            for v in session.variant["grid_ticks"]]


def legend_rings(session: ChartSession) -> Dict[str, Any]:
    """Nested size-legend rings sharing a bottom point at the legend origin."""
    ox, oy = session.variant["legend_origin"]
    tx, ty = session.variant["legend_title_offset"]
    rings = []
    for v in params.LEGEND_VALUES:
        r = float(session.size(v))
        rings.append({"value": v, "r": _round(r), "cy": _round(-r), "label_y": _round(-r * 2 - 2),
                      "label": f"{v}%"})
    return {"x": ox, "y": oy, "title_x": tx, "title_y": ty,
            "title": list(session.variant["legend_title"]), "rings": rings}


def build_payload(session: ChartSession, collected: Dict[str, Any]) -> Dict[str, Any]:
    variant = session.variant
    center = variant.get("center_line")
    layouts = {}
    for key, lay in collected["layouts"].items():
        snap = lay["snapshot"]
        layouts[key] = {
            "positions": [[_round(s["x"]), _round(s["y"])] for s in snap],
            "labels": [s["label"] for s in snap],
            "fill": [s["fill"] for s in snap],
            "opacity": [_round(s["fill_opacity"]) for s in snap],
            "tooltips": lay["tooltips"],
        }
    first = collected["layouts"][collected["initial_key"]]["snapshot"]
    return {
        "variant": session.variant_name,
        "width": session.width,
        "height": session.height,
        "margin": session.margin,
        "keys": session.keys,
        "displayNames": {k: utils.display_name(k, session.variant_name) for k in session.keys},
        "initialKey": collected["initial_key"],
        "sources": [s["source"] for s in first],
        "radii": [_round(s["r"]) for s in first],
        "ticks": axis_ticks(session),
        "centerLine": _round(session.x_scale(center)) if center is not None else None,
        "legend": legend_rings(session),
        "hover": {
            "signed": session.signed,
            "fill": variant.get("hover_fill"),
        },
        "intro": collected["intro"],
        "layouts": layouts,
        "lastUpdated": LAST_UPDATED,
    }


def make_page(payload: Dict[str, Any], title: str, data_href: str = "data.json") -> str:
    payload_json = json.dumps(payload, separators=(",", ":"))
    script = CHART_JS.replace("__PAYLOAD__", payload_json)
    html = (
        CHART_HTML
        .replace("%TITLE%", title)
        .replace("%HEADER%", make_header(title, data_href))
        .replace("%CONTROLS%", make_controls(payload["keys"], payload["displayNames"], payload["initialKey"]))
        .replace("%WIDTH%", str(payload["width"]))
        .replace("%HEIGHT%", str(payload["height"]))
        .replace("%FOOTER_TEXT%", make_footer_note("Built as static HTML from the poll data."))
    )
    return html.replace("__SCRIPT__", script)


def build_chart_page(session: ChartSession, collected: Dict[str, Any], out_dir: Path = OUT_DIR,
                     title: str | None = None, data_href: str = "data.json") -> Path:
    if title is None:
        title = "Poll Sources · " + ("Difference from All Adults" if session.signed else "Share by Group")
    page = make_page(build_payload(session, collected), title, data_href)
    path = out_dir / PAGE_NAME
    write_text(path, page)
    return path
