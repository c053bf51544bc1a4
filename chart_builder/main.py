import shutil
from pathlib import Path

import params
from .config import DATA_PATH, OUT_DIR, DEFAULT_SEED, FRAME_EVERY
from .io_utils import ensure_dirs, write_text, load_points
from .page import collect_layouts, build_chart_page
from .plots import plot_all
from .session import ChartSession
from .templates import BASE_CSS


def build_chart(data_path: Path = DATA_PATH, variant: str = "share", out_dir: Path = OUT_DIR,
                static_count: int = params.STATIC_LABEL_COUNT,
                dynamic_count: int = params.DYNAMIC_LABEL_COUNT,
                seed: int = DEFAULT_SEED, frame_every: int = FRAME_EVERY, make_plots: bool = True) -> ChartSession:
    if variant not in params.CHART_VARIANTS:
        raise KeyError(f"Unknown chart variant {variant!r}; expected one of {', '.join(params.CHART_VARIANTS)}")
    plots_dir = out_dir / "plots"
    ensure_dirs(out_dir, plots_dir)
    write_text(out_dir / "styles.css", BASE_CSS)

    points = load_points(data_path)
    print(f"Loaded {len(points)} sources from {data_path}")
    session = ChartSession(points, variant=variant, static_count=static_count,
                           dynamic_count=dynamic_count, seed=seed)
    collected = collect_layouts(session, frame_every=frame_every)

    data_name = "data" + data_path.suffix.lower()
    try:
        shutil.copy2(data_path, out_dir / data_name)
    except Exception as e:
        print(f"Warning: couldn't copy data file: {e}")

    page_path = build_chart_page(session, collected, out_dir, data_href=data_name)
    print(f"Wrote chart page to {page_path}")

    if make_plots:
        try:
            plot_all(session, collected, plots_dir)
        except Exception as e:
            print(f"Warning: couldn't build plots: {e}")

    print(f"Done. Built {variant} chart for {len(session.keys)} attribute keys.")
    return session
