"""Number and duration parsing utilities."""

import math
import re

_DURATION_UNITS = re.compile(r"^(?:(?P<hours>\d+(?:\.\d+)?)h)?\s*(?:(?P<minutes>\d+)m)?$")


def parse_number(number_str: str) -> float:
    """Parse a rate, count or amount string into a float.

    Handles various formats:
    - "30"
    - "12.5"
    - "12,5" (comma as decimal separator)
    - "$30.00"
    - "1 234.50"

    Args:
        number_str: Number string

    Returns:
        Parsed value

    Raises:
        ValueError: If the string cannot be parsed
    """
    if not number_str or not number_str.strip():
        raise ValueError("Empty number string")

    cleaned = re.sub(r"[$€£¥\s]", "", number_str.strip())

    # A single comma with no dot is a decimal separator, otherwise commas group thousands
    if cleaned.count(",") == 1 and "." not in cleaned:
        cleaned = cleaned.replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        value = float(cleaned)
    except ValueError:
        raise ValueError(f"Could not parse number '{number_str}'")

    # float() also accepts "nan" and "inf"
    if not math.isfinite(value):
        raise ValueError(f"Could not parse number '{number_str}'")
    return value


def parse_duration(duration_str: str) -> float:
    """Parse a duration into decimal hours.

    Accepts "1.5", "1:30", "1h30m", "1h" and "45m".

    Raises:
        ValueError: If the string is not a duration
    """
    cleaned = duration_str.strip().lower()
    if not cleaned:
        raise ValueError("Empty duration string")

    if ":" in cleaned:
        hours_part, _, minutes_part = cleaned.partition(":")
        if not (hours_part.isdigit() and minutes_part.isdigit()) or int(minutes_part) >= 60:
            raise ValueError(f"Could not parse duration '{duration_str}'")
        return int(hours_part) + int(minutes_part) / 60.0

    match = _DURATION_UNITS.match(cleaned)
    if match and (match.group("hours") or match.group("minutes")):
        hours = float(match.group("hours") or 0)
        minutes = int(match.group("minutes") or 0)
        return hours + minutes / 60.0

    return parse_number(cleaned)
