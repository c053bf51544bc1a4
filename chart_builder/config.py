from pathlib import Path
import datetime

# Paths
DATA_PATH = Path("data/data.json")
OUT_DIR = Path("docs")
PLOTS_DIR = OUT_DIR / "plots"
PAGE_NAME = "bubbles.html"

# Layout defaults
DEFAULT_SEED = 7
# Record one HTML animation frame every N solver ticks
FRAME_EVERY = 5

# timestamp used in footers (UTC at build time)
LAST_UPDATED = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

FOOTER_TEXT = (
    "Bubble chart of poll sources.<br />\n"
    "Hover a bubble for its values; use the buttons to change the slice driving horizontal position."
)
