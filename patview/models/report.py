"""Parsing of log pattern report documents"""

import json
from datetime import datetime, timezone
from typing import Any

from patview.models.pattern import Pattern, Sample


class ReportError(Exception):
    """Raised when a report cannot be read or is not a valid pattern report"""


def parse_report(content: str) -> list[Pattern]:
    """Parse a report document into patterns sorted by count, largest first.

    The document is a JSON array of ``{"patterns", "count", "samples"}``
    objects, where ``samples`` is a string holding a JSON-encoded array of
    ``{"predict", "date", "rawlog"}`` objects.
    """
    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as e:
        raise ReportError(f"Report is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ReportError("Report must be a JSON array of patterns")

    patterns = [_parse_pattern(item, i) for i, item in enumerate(data)]
    if not patterns:
        raise ReportError("Report contains no patterns")
    if sum(pattern.count for pattern in patterns) == 0:
        raise ReportError("Report patterns have a total count of zero")

    patterns.sort(key=lambda p: p.count, reverse=True)
    return patterns


def _parse_pattern(item: Any, position: int) -> Pattern:
    if not isinstance(item, dict):
        raise ReportError(f"Pattern #{position} is not an object")

    text = _get_field(item, "patterns", str, f"pattern #{position}")
    count = _get_field(item, "count", int, f"pattern #{position}")
    if count < 0:
        raise ReportError(f"Pattern #{position} has a negative count")

    raw_samples = _get_field(item, "samples", str, f"pattern #{position}")
    try:
        samples_data = json.loads(raw_samples)
    except (ValueError, RecursionError) as e:
        raise ReportError(f"Samples of pattern #{position} are not valid JSON") from e
    if not isinstance(samples_data, list):
        raise ReportError(f"Samples of pattern #{position} must be a JSON array")

    samples = [
        _parse_sample(sample, f"sample #{i} of pattern #{position}")
        for i, sample in enumerate(samples_data)
    ]
    return Pattern(text=text, count=count, samples=samples)


def _parse_sample(item: Any, where: str) -> Sample:
    if not isinstance(item, dict):
        raise ReportError(f"{where.capitalize()} is not an object")

    predict = _get_field(item, "predict", int, where)
    date = _get_field(item, "date", str, where)
    rawlog = _get_field(item, "rawlog", str, where)
    return Sample(
        predicted_label=predict,
        timestamp=_parse_date(date, where),
        raw_log=rawlog,
    )


def _get_field(item: dict[str, Any], key: str, type_: type, where: str) -> Any:
    if key not in item:
        raise ReportError(f"Missing field {key!r} in {where}")
    value = item[key]
    # bool is an int subclass but never a valid count or label
    if not isinstance(value, type_) or isinstance(value, bool):
        raise ReportError(
            f"Field {key!r} in {where} must be of type {type_.__name__}"
        )
    return value


def _parse_date(value: str, where: str) -> datetime:
    try:
        timestamp = datetime.fromisoformat(value)
    except ValueError as e:
        raise ReportError(f"Invalid date {value!r} in {where}") from e
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)
