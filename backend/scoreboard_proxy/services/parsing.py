"""
Parsers for raw scoreboard fragments.

The history endpoint returns a chart-style table: a list of column
descriptors and a list of rows, each row holding one cell per column.
Column 0 is the timestamp; every other column is one image.
"""

import re
from datetime import datetime, time
from typing import Any, List, Optional

from scoreboard_proxy.core.errors import malformed_response
from scoreboard_proxy.schemas.team import HistoryElement
from scoreboard_proxy.schemas.upstream import ChartCell, ChartColumn, ChartRow

DATE_TIME_FORMATS = [
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
]

TIME_FORMATS = ["%H:%M:%S", "%H:%M:%S.%f", "%H:%M"]

# Chart libraries encode dates as Date(year, month, day[, h, m, s]) with a zero-based month
CHART_DATE_PATTERN = re.compile(r"^Date\((\d+(?:\s*,\s*\d+){2,5})\)$")

IMAGE_NAME_PATTERN = re.compile(r"([^0-9])([0-9])")


def parse_image_name(raw: str) -> str:
    """
    Turn a raw image identifier into a display name.

    Keeps the part before the first underscore and puts a space between
    a non-digit and the digit that follows it, e.g. 'Win10_Desktop' -> 'Win 10'.
    """
    return IMAGE_NAME_PATTERN.sub(r"\1 \2", raw.split("_")[0])


def parse_raw_date_time(text: str) -> datetime:
    """
    Parse an upstream date-time string.

    Args:
        text: e.g. '2024-11-02 14:05:00' or 'Date(2024,10,2,14,5,0)'

    Returns:
        Parsed (naive) datetime

    Raises:
        ScoreboardError: If the text is not in a known format
    """
    if not isinstance(text, str):
        raise malformed_response(f"Expected a date-time string, got {text!r}")

    stripped = text.strip()
    match = CHART_DATE_PATTERN.match(stripped)
    if match:
        parts = [int(p) for p in match.group(1).split(",")]
        parts[1] += 1
        try:
            return datetime(*parts)
        except ValueError:
            raise malformed_response(f"Invalid date-time: {text!r}")

    for fmt in DATE_TIME_FORMATS:
        try:
            return datetime.strptime(stripped, fmt)
        except ValueError:
            continue

    raise malformed_response(f"Invalid date-time: {text!r}")


def parse_raw_time(text: str) -> time:
    """
    Parse an upstream time-of-day string ('14:05:00' or '14:05').

    Raises:
        ScoreboardError: If the text is not in a known format
    """
    if not isinstance(text, str):
        raise malformed_response(f"Expected a time string, got {text!r}")

    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text.strip(), fmt).time()
        except ValueError:
            continue

    raise malformed_response(f"Invalid time: {text!r}")


def parse_history_time(value: Any) -> time:
    """
    Time of day of a history row's timestamp cell.

    The date part is dropped whatever its format: only the last
    whitespace-separated token (or the part after an ISO 'T') is parsed.
    """
    if not isinstance(value, str) or not value.strip():
        raise malformed_response(f"Expected a timestamp string, got {value!r}")

    if CHART_DATE_PATTERN.match(value.strip()):
        return parse_raw_date_time(value).time()

    token = value.split()[-1]
    if "T" in token:
        token = token.split("T")[-1]
    return parse_raw_time(token)


def _cell_value(cells: List[Optional[ChartCell]], index: int) -> Any:
    if index >= len(cells) or cells[index] is None:
        return None
    return cells[index].v


def parse_raw_history(cols: List[ChartColumn], rows: List[ChartRow]) -> List[HistoryElement]:
    """
    Build one history element per row.

    Each row's cells after the first are keyed by the label of the matching
    column. Cells that are missing or hold no value become None.

    Args:
        cols: Column descriptors; column 0 is the timestamp
        rows: Table rows, one cell per column

    Returns:
        History elements in row order

    Raises:
        ScoreboardError: If a row has no usable timestamp
    """
    labels = [col.label for col in cols[1:]]
    history = []

    for row in rows:
        timestamp = _cell_value(row.c, 0)
        if timestamp is None:
            raise malformed_response("History row has no timestamp")

        images = {label: _cell_value(row.c, index + 1) for index, label in enumerate(labels)}
        history.append(HistoryElement(time=parse_history_time(timestamp), images=images))

    return history
