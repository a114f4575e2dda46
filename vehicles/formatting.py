"""Number formatting helpers for status messages and tables."""


def format_miles(miles: float) -> str:
    """Format mileage with thousands separators (e.g., '15,050' or '1,234.5')."""
    return f"{miles:,.3f}".rstrip("0").rstrip(".")


def format_percent(value: float) -> str:
    """Format a percentage to one decimal place (e.g., '58.1')."""
    return f"{value:.1f}"


def format_number(value: float) -> str:
    """Format a plain number without a trailing '.0' (e.g., '82', '7.5')."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def availability(flag: bool) -> str:
    """Describe an optional feature."""
    return "Available" if flag else "Not available"
