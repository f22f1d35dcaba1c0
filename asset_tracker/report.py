# asset_tracker/report.py
import os
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from .currency import format_price
from .lifespan import LifespanStatus
from .registry import AssetRow

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)

USE_COLOR = os.getenv("TRACKER_COLOR", "true").lower() == "true"
DATE_FORMAT = os.getenv("TRACKER_DATE_FORMAT", "%Y-%m-%d")

RESET = "\033[0m"
COLORS = {
    LifespanStatus.EXPIRING: "\033[31m",
    LifespanStatus.WARNING: "\033[33m",
    LifespanStatus.OK: "",
}

RULE = "=" * 89


def _row_context(row: AssetRow, use_color: bool, date_format: str) -> dict:
    color = COLORS[row.status] if use_color else ""
    return {
        "kind": row.item.kind.display_name,
        "name": row.item.name,
        "price_str": format_price(row.price, row.item.office),
        "office": row.item.office.display_name,
        "date_str": row.item.purchase_date.strftime(date_format),
        "color": color,
        "reset": RESET if color else "",
    }


def build_text_report(
    rows: List[AssetRow],
    use_color: bool = USE_COLOR,
    date_format: str = DATE_FORMAT,
) -> str:
    template = env.get_template("asset_list.txt")

    expiring = sum(1 for r in rows if r.status is LifespanStatus.EXPIRING)
    warning = sum(1 for r in rows if r.status is LifespanStatus.WARNING)
    summary_text = f"{len(rows)} items · {expiring} expiring · {warning} nearing end of life"

    ctx = {
        "rule": RULE,
        "rows": [_row_context(r, use_color, date_format) for r in rows],
        "summary_text": summary_text,
    }

    return template.render(**ctx)
