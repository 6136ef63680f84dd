# core/formatters.py

# all pure text helpers
# must never import from models!

from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


# === report formatters ===


def format_report_row(fields: list[Any]) -> str:
    return ",".join(str(field) for field in fields)


def format_report_table(rows: list[list[Any]]) -> str:
    return "\n".join(format_report_row(row) for row in rows)


def format_fixed_decimal(value: float) -> str:
    # six-place fixed notation, e.g. 8.0 -> "8.000000"
    return f"{value:f}"


def format_truncated_percentage(value: float) -> str:
    """
    Renders a percentage cut (not rounded) to two decimal places.

    The value is first rendered in six-place fixed notation, then sliced two characters past
    the decimal point, so 66.666666 becomes "66.66" while 99.9999996 becomes "100.00".
    """
    text = format_fixed_decimal(value)

    return text[: text.index(".") + 3]
