import math
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

import params
from .config import OUT_DIR, PLOTS_DIR


def ensure_dirs(out_dir: Path = OUT_DIR, plots_dir: Path = PLOTS_DIR):
    out_dir.mkdir(parents=True, exist_ok=True)
    plots_dir.mkdir(parents=True, exist_ok=True)


def write_text(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _clean(v: Any) -> Any:
    if v is None:
        return None
    if isinstance(v, float) and math.isnan(v):
        return None
    if isinstance(v, str):
        s = v.strip()
        if s == "":
            return None
        try:
            return float(s)
        except ValueError:
            return s
    if hasattr(v, "item"):
        # numpy scalar -> python scalar
        return v.item()
    return v


def read_frame(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path, encoding="utf-8-sig", dtype={params.ID_KEY: str})
    else:
        df = pd.read_json(path, orient="records", dtype={params.ID_KEY: str})
    # normalize header names (strip spaces)
    df.columns = [str(c).strip() for c in df.columns]
    return df


def frame_to_points(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Turn a loaded frame into point records.

    Attribute cells become floats or None; the identifier stays a string.
    Raises ValueError when the identifier column is missing or repeats.
    """
    if params.ID_KEY not in df.columns:
        raise ValueError(f"Data is missing the '{params.ID_KEY}' column")
    points: List[Dict[str, Any]] = []
    seen = set()
    for rec in df.to_dict(orient="records"):
        ident = rec.get(params.ID_KEY)
        if ident is None or (isinstance(ident, float) and math.isnan(ident)):
            raise ValueError("Data contains a record without a source")
        ident = str(ident).strip()
        if ident in seen:
            raise ValueError(f"Duplicate source in data: {ident}")
        seen.add(ident)
        p: Dict[str, Any] = {params.ID_KEY: ident}
        for k, v in rec.items():
            if k == params.ID_KEY or k in params.LAYOUT_KEYS:
                continue
            p[k] = _clean(v)
        points.append(p)
    return points


def load_points(path: Path) -> List[Dict[str, Any]]:
    return frame_to_points(read_frame(path))


def attribute_keys(points: List[Dict[str, Any]]) -> List[str]:
    """Attribute keys present in the data, in first-seen column order."""
    keys: List[str] = []
    for p in points:
        for k in p:
            if k == params.ID_KEY or k in params.LAYOUT_KEYS:
                continue
            if k not in keys:
                keys.append(k)
    return keys
