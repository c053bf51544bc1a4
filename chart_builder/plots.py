import os
from pathlib import Path
from typing import Any, Dict, List

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

import utils
from .config import PLOTS_DIR
from .page import axis_ticks, legend_rings
from .session import ChartSession


def _apply_axes_styling(ax, session: ChartSession):
    # pixel space, y growing downward like the page's svg
    ax.set_xlim(0, session.width)
    ax.set_ylim(session.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    bottom = session.height - session.margin["bottom"]
    top = session.margin["top"]
    for t in axis_ticks(session):
        ax.plot([t["x"], t["x"]], [bottom, top], color="black", linestyle=(0, (2, 2)), linewidth=0.8, alpha=0.2)
        ax.text(t["x"], bottom + 20, t["label"], ha="center", va="center", fontsize=10, alpha=0.7)
    center = session.variant.get("center_line")
    if center is not None:
        cx = float(session.x_scale(center))
        ax.plot([cx, cx], [bottom, top], color="#333", linewidth=1)


def _draw_legend(ax, session: ChartSession):
    lg = legend_rings(session)
    ox, oy = lg["x"], lg["y"]
    for ring in lg["rings"]:
        ax.add_patch(Circle((ox, oy + ring["cy"]), ring["r"], fill=False, edgecolor="#bbb", linestyle="--", linewidth=0.8))
        ax.text(ox, oy + ring["label_y"], ring["label"], ha="center", va="bottom", fontsize=7, color="#999")
    for i, line in enumerate(lg["title"]):
        ax.text(ox + lg["title_x"], oy + lg["title_y"] + i * 13, line, ha="left", va="baseline",
                fontsize=8, fontweight="bold", color="#666")


def _draw_bubbles(ax, snapshot: List[Dict[str, Any]]):
    for s in snapshot:
        ax.add_patch(Circle((s["x"], s["y"]), s["r"], facecolor=s["fill"], alpha=s["fill_opacity"], edgecolor="none"))
    # labels on top of every circle
    for s in snapshot:
        if s["label"]:
            ax.text(s["x"], s["y"], s["label"], ha="center", va="center", fontsize=8, fontweight="bold",
                    color="black", zorder=10)


def plot_layout(session: ChartSession, key: str, snapshot: List[Dict[str, Any]], out_dir: Path = PLOTS_DIR) -> str:
    fig, ax = plt.subplots(figsize=(session.width / 100, session.height / 100), dpi=100)
    _apply_axes_styling(ax, session)
    _draw_legend(ax, session)
    _draw_bubbles(ax, snapshot)
    ax.set_title(utils.display_name(key, session.variant_name), fontsize=12)

    os.makedirs(out_dir, exist_ok=True)
    filename = f"{session.variant_name}_{key}.png"
    path = os.path.join(out_dir, filename)
    fig.savefig(path)
    plt.close(fig)
    print(f"Saved {filename}")
    return path


def plot_all(session: ChartSession, collected: Dict[str, Any], out_dir: Path = PLOTS_DIR) -> List[str]:
    paths = []
    for key, lay in collected["layouts"].items():
        try:
            paths.append(plot_layout(session, key, lay["snapshot"], out_dir))
        except Exception as e:
            print(f"Could not plot {key}: {e}")
    return paths
