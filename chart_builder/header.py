from typing import Dict, List, Optional
from .config import LAST_UPDATED, FOOTER_TEXT


def make_header(title: str, data_href: str = "data.json") -> str:
    """Return the header HTML snippet shown above the chart.

    - title: short heading text displayed in the header legend
    - data_href: link to the copy of the input data written next to the page
    """
    return (
        f'<div class="card site-header" style="display:flex;justify-content:space-between;align-items:center;padding:8px">'
        f'<div class="small-links">'
        f'<a class="btn" href="./bubbles.html">Chart</a>'
        f'<a class="btn" href="./{data_href}">Data</a>'
        f'</div>'
        f'<div class="legend">{title}</div>'
        f'</div>'
    )


def make_controls(keys: List[str], names: Dict[str, str], active: str) -> str:
    # One button per attribute key; ids follow btn-<key> so the script can find them
    buttons = []
    for k in keys:
        cls = "btn active" if k == active else "btn"
        buttons.append(f'<button type="button" class="{cls}" id="btn-{k}" data-key="{k}">{names.get(k, k)}</button>')
    return f'<div class="controls small-links">{"".join(buttons)}</div>'


def make_footer_note(extra: Optional[str] = None) -> str:
    """Return a footer text line with standard site note and timestamp.

    extra: optional extra note to append before the timestamp
    """
    extra_note = (extra + " ") if extra else ""
    return f"{FOOTER_TEXT} {extra_note}Last updated: {LAST_UPDATED}"
