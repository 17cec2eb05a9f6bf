"""Date and time normalization for loosely formatted event text."""
import logging
import re
from datetime import date, datetime
from typing import Optional, Tuple

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

# Month name or abbreviation, day, optional year: "Mar 14", "March 14, 2026".
# Groups: 1 = whole date text, 2 = day, 3 = year
DATE_PATTERN = re.compile(
    r'\b((?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?'
    r'\s+(\d{1,2})(?:,?\s+(\d{4}))?)\b',
    re.IGNORECASE
)

TIME_RANGE_PATTERN = re.compile(
    r'(\d{1,2}:\d{2}\s*(?:am|pm))\s*[-–—]?\s*(\d{1,2}:\d{2}\s*(?:am|pm))?',
    re.IGNORECASE
)

TIME_PATTERN = re.compile(r'(\d{1,2}):?(\d{2})?\s*(am|pm)?', re.IGNORECASE)


def find_date_text(text: str) -> Optional[re.Match]:
    """
    Find the first month-name-anchored date substring in text.

    Args:
        text: Arbitrary text

    Returns:
        Regex match whose group 1 is the date text, or None
    """
    return DATE_PATTERN.search(text)


def find_time_range(text: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Find an "H:MM am/pm - H:MM am/pm" range and normalize both ends.

    Args:
        text: Arbitrary text

    Returns:
        Tuple of (start_time, end_time), either of which may be None
    """
    match = TIME_RANGE_PATTERN.search(text)
    if not match:
        return None, None

    start_time = normalize_time(match.group(1))
    end_time = normalize_time(match.group(2)) if match.group(2) else None
    return start_time, end_time


def normalize_date(raw: str, today: Optional[date] = None) -> Optional[str]:
    """
    Normalize a loose month/day/year string to ISO 8601 (YYYY-MM-DD).

    When the text has no year, the next occurrence of that month and day
    on or after ``today`` is used.

    Args:
        raw: Date text such as "Mar 14", "March 14, 2026" or "Sept. 3"
        today: Reference date for year inference (default: today)

    Returns:
        ISO 8601 date string, or None if the text is not a recognizable date
    """
    if not raw:
        return None

    match = find_date_text(raw)
    if not match:
        return None

    today = today or date.today()
    cleaned = match.group(1).replace(',', ' ').replace('.', ' ')
    day = int(match.group(2))
    year = int(match.group(3)) if match.group(3) else None

    try:
        parsed = dateutil_parser.parse(
            cleaned, default=datetime(today.year, 1, 1)
        ).date()
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unrecognized date '{raw}': {e}")
        return None

    # dateutil reads an impossible day such as "Dec 45" as a year
    if parsed.day != day or parsed.year != (year or today.year):
        logger.debug(f"Unrecognized date '{raw}': parsed as {parsed}")
        return None

    if year is None and parsed < today:
        try:
            parsed = parsed.replace(year=today.year + 1)
        except ValueError:
            # Feb 29 with no leap year following
            return None

    return parsed.isoformat()


def normalize_time(raw: str) -> Optional[str]:
    """
    Normalize a loose time string to 24-hour format (HH:MM).

    Args:
        raw: Time text such as "6:00 PM", "6pm", "12 am" or "18:00"

    Returns:
        24-hour formatted time string, or None if no valid time is found
    """
    if not raw:
        return None

    match = TIME_PATTERN.search(raw)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    period = match.group(3).lower() if match.group(3) else None

    if period == 'pm' and hours != 12:
        hours += 12
    elif period == 'am' and hours == 12:
        hours = 0

    if hours > 23 or minutes > 59:
        logger.debug(f"Time out of range: '{raw}'")
        return None

    return f"{hours:02d}:{minutes:02d}"
