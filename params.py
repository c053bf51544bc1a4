from typing import List, Dict, Any


CHART_WIDTH = 900
CHART_HEIGHT = 600
MARGIN = {"top": 50, "right": 50, "bottom": 50, "left": 50}

# Column holding the point identifier in the input data
ID_KEY = "source"

# Reference attribute: drives bubble size and the static labels, and is
# the key selected when a chart first loads.
REFERENCE_KEY = "overall"

# Keys owned by the layout, never treated as attribute keys
LAYOUT_KEYS = {"x", "y", "vx", "vy"}

STATIC_LABEL_COUNT = 10
DYNAMIC_LABEL_COUNT = 2

# Extra px added to each radius for collision
COLLIDE_PADDING = 2

# Values drawn as nested rings in the size legend
LEGEND_VALUES: List[float] = [5, 10, 20]

DISPLAY_NAMES = {
    "overall": "Overall",
    "dem": "Democrats",
    "rep": "Republicans",
    "male": "Men",
    "female": "Women",
    "age18": "Ages 18-29",
    "age30": "Ages 30-49",
    "age50": "Ages 50-64",
    "age65": "Ages 65+",
}

# The difference chart calls the reference slice "All Adults"
DIFFERENCE_DISPLAY_NAMES = dict(DISPLAY_NAMES, overall="All Adults")

# Two chart flavours:
#   share      - raw percentages, linear sizing, single fill colour
#   difference - signed differences, sqrt sizing, sign-coloured fill with
#                magnitude-based opacity, and a bottom-K label pass
CHART_VARIANTS: Dict[str, Dict[str, Any]] = {
    "share": {
        "signed": False,
        "x_domain": (0, 60),
        "size_scale": "linear",
        "size_domain": (0, 35),
        "size_range": (2, 50),
        "x_strength": 0.5,
        "y_strength": 0.08,
        "grid_ticks": [0, 10, 20, 30, 40, 50, 60],
        "fill": "#69b3a2",
        "hover_fill": "#4e8a7c",
        "display_names": DISPLAY_NAMES,
        "reference_label": "Overall",
        "legend_origin": (CHART_WIDTH - 250, 100),
        "legend_title_offset": (30, -40),
        "legend_title": [
            "Bubble size represents the",
            "magnitude of percent",
            "in the overall sample",
        ],
    },
    "difference": {
        "signed": True,
        "x_domain": (-15, 15),
        "size_scale": "sqrt",
        "size_domain": (0, 20),
        "size_range": (8, 50),
        "opacity_domain": (0, 20),
        "opacity_range": (0.3, 1),
        # Above this absolute value a bubble is fully opaque
        "opacity_threshold": 20,
        "x_strength": 0.8,
        "y_strength": 0.1,
        "grid_ticks": [-15, -10, -5, 0, 5, 10, 15],
        "center_line": 0,
        "positive_fill": "#4CAF50",
        "negative_fill": "#F44336",
        "display_names": DIFFERENCE_DISPLAY_NAMES,
        "reference_label": "Overall diff",
        "legend_origin": (CHART_WIDTH - 200, 150),
        "legend_title_offset": (70, -60),
        "legend_title": [
            "Bubble size represents the",
            "magnitude of percent difference",
            "in the overall samples",
        ],
    },
}
