import math

import params


def value_of(point, key) -> float:
    """
    Numeric value of point[key], treating missing/None/NaN (and anything
    unparseable) as 0.
    """
    v = point.get(key)
    if v is None:
        return 0.0
    try:
        v = float(v)
    except (ValueError, TypeError):
        return 0.0
    if math.isnan(v):
        return 0.0
    return v


def pct_str(value, signed=False) -> str:
    """
    Convert a percentage to its tooltip form (ex. 12.5%, +3%, -4.2%).
    Whole numbers drop the trailing .0 so "+3%" reads like the source data.
    """
    if value is None:
        return "?"
    try:
        v = float(value)
    except (ValueError, TypeError):
        return "?"
    if math.isnan(v):
        return "?"
    text = f"{v:g}"
    prefix = "+" if signed and v > 0 else ""
    return f"{prefix}{text}%"


def display_name(key: str, variant: str = "share") -> str:
    names = params.CHART_VARIANTS[variant]["display_names"]
    return names.get(key, key)


def sign_fill(value, variant: str = "difference") -> str:
    """Fill colour for a signed value; missing counts as 0 (positive side)."""
    cfg = params.CHART_VARIANTS[variant]
    if not cfg.get("signed"):
        return cfg["fill"]
    return cfg["positive_fill"] if value >= 0 else cfg["negative_fill"]
