"""Thin wrapper to build the bubble chart page using the chart_builder package."""

import argparse
from pathlib import Path

import params
from chart_builder.config import DATA_PATH, OUT_DIR, DEFAULT_SEED, FRAME_EVERY
from chart_builder.main import build_chart


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the poll-source bubble chart (HTML page + PNG snapshots)")
    parser.add_argument("--data", type=Path, default=DATA_PATH, help="JSON or CSV file of sources")
    parser.add_argument("--variant", choices=sorted(params.CHART_VARIANTS), default="share")
    parser.add_argument("--out", type=Path, default=OUT_DIR, help="Output directory")
    parser.add_argument("--static-count", type=int, default=params.STATIC_LABEL_COUNT,
                        help="Sources always labelled (top by overall)")
    parser.add_argument("--dynamic-count", type=int, default=params.DYNAMIC_LABEL_COUNT,
                        help="Extra sources labelled per selected key")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--frame-every", type=int, default=FRAME_EVERY,
                        help="Record an intro animation frame every N ticks")
    parser.add_argument("--no-plots", dest="make_plots", action="store_false", help="Skip PNG snapshots")
    args = parser.parse_args(argv)

    build_chart(data_path=args.data, variant=args.variant, out_dir=args.out,
                static_count=args.static_count, dynamic_count=args.dynamic_count,
                seed=args.seed, frame_every=args.frame_every, make_plots=args.make_plots)


if __name__ == "__main__":
    main()
