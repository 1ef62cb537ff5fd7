from datetime import datetime

# Fixed en-US names, independent of the process locale
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
MERIDIEM = ("AM", "PM")


def format_money(value: float) -> str:
    if value < 0:
        return f"-${abs(value):.2f}"
    return f"${value:.2f}"


def format_signed_money(value: float) -> str:
    sign = "+" if value >= 0 else "-"
    return f"{sign}${abs(value):.2f}"


def format_percent(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"


def format_signed_percent(value: float, decimals: int = 1) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{decimals}f}%"


def format_quantity(value: float) -> str:
    # 100.0 -> "100", 0.125 -> "0.125"
    return f"{value:.4f}".rstrip("0").rstrip(".")


def format_datetime(value: datetime) -> str:
    """en-US style, e.g. "Oct 19, 2026, 02:30 PM"."""
    hour = value.hour % 12 or 12
    return (
        f"{MONTH_ABBR[value.month - 1]} {value.day}, {value.year}, "
        f"{hour:02d}:{value.minute:02d} {MERIDIEM[value.hour >= 12]}"
    )


def format_date(value: datetime) -> str:
    """en-US short date, e.g. "10/19/2026"."""
    return f"{value.month}/{value.day}/{value.year}"
