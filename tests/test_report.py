import datetime
from decimal import Decimal

from asset_tracker.models import Kind, Office
from asset_tracker.registry import AssetRegistry
from asset_tracker.report import COLORS, RESET, build_text_report
from asset_tracker.lifespan import LifespanStatus

ON = datetime.date(2026, 10, 19)


def _registry(make_item):
    return AssetRegistry([
        make_item(
            name="Unix",
            kind=Kind.COMPUTER,
            office=Office.TOKYO,
            price_usd=Decimal("600"),
            purchase_date=datetime.date(2021, 6, 18),
        ),
        make_item(
            name="Pixel",
            kind=Kind.PHONE,
            office=Office.LONDON,
            price_usd=Decimal("200"),
            purchase_date=datetime.date(2024, 3, 1),
        ),
        make_item(
            name="Fresh",
            kind=Kind.PHONE,
            office=Office.NEW_YORK,
            price_usd=Decimal("150"),
            purchase_date=ON,
        ),
    ])


def test_plain_report_lists_rows_in_order(make_item) -> None:
    report = build_text_report(_registry(make_item).list(ON), use_color=False)
    lines = report.splitlines()

    assert "\033[" not in report
    assert lines[0] == lines[2] == lines[-2] == "=" * 89
    assert lines[1].startswith("| Type ")
    assert lines[3].startswith("| Computer   | Unix ")
    assert "¥91200.00" in lines[3]
    assert "2021-06-18" in lines[3]
    assert "| Phone      | Fresh " in lines[4]
    assert "$150.00" in lines[4]
    assert "£160.00" in lines[5]
    assert all(len(line) == 89 for line in lines[:-1])


def test_colored_report_marks_rows_by_status(make_item) -> None:
    report = build_text_report(_registry(make_item).list(ON), use_color=True)
    lines = report.splitlines()

    # Unix expired long ago, Pixel ends 2027-03-01 (< 180 days), Fresh is new
    assert lines[3].startswith(COLORS[LifespanStatus.EXPIRING])
    assert lines[3].endswith(RESET)
    assert lines[5].startswith(COLORS[LifespanStatus.WARNING])
    assert lines[4].startswith("| Phone ")
    assert lines[-1] == "3 items · 1 expiring · 1 nearing end of life"


def test_custom_date_format(make_item) -> None:
    report = build_text_report(_registry(make_item).list(ON), use_color=False, date_format="%d/%m/%Y")
    assert "18/06/2021" in report


def test_empty_report() -> None:
    report = build_text_report([], use_color=False)
    assert "No items registered." in report
    assert report.splitlines()[-1] == "0 items · 0 expiring · 0 nearing end of life"
