"""Builders for report documents and patterns used across the tests"""

import json
from datetime import datetime, timezone
from typing import Any

from patview.models.pattern import Pattern, Sample, compute_percentages

BASE_DATE = datetime(2022, 3, 1, 10, 0, 0, tzinfo=timezone.utc)


def make_sample(raw_log: str, predicted_label: int = 0, minute: int = 0) -> Sample:
    """Create a sample at BASE_DATE plus the given minutes"""
    return Sample(
        predicted_label=predicted_label,
        timestamp=BASE_DATE.replace(minute=minute),
        raw_log=raw_log,
    )


def make_pattern(text: str, count: int, raw_logs: list[str] | None = None) -> Pattern:
    """Create a pattern with one sample per raw log"""
    return Pattern(
        text=text,
        count=count,
        samples=[
            make_sample(raw_log, minute=i) for i, raw_log in enumerate(raw_logs or [])
        ],
    )


def make_report(*patterns: Pattern) -> list[Pattern]:
    """Create a loaded report: the patterns with their percentages computed"""
    report = list(patterns)
    compute_percentages(report)
    return report


def report_item(text: str, count: int, samples: list[dict[str, Any]]) -> dict[str, Any]:
    """Create one pattern object of a report document"""
    return {"patterns": text, "count": count, "samples": json.dumps(samples)}


def sample_item(
    rawlog: str, date: str = "2022-03-01T10:00:00Z", predict: int = 0
) -> dict[str, Any]:
    """Create one sample object of a report document"""
    return {"predict": predict, "date": date, "rawlog": rawlog}
