"""Log pattern report entities"""

import dataclasses
from datetime import datetime


@dataclasses.dataclass(frozen=True)
class Sample:
    """One raw log line matched by a pattern"""

    predicted_label: int
    timestamp: datetime
    raw_log: str

    @property
    def display_date(self) -> str:
        """Get the timestamp formatted for the sample tables"""
        return self.timestamp.strftime("%Y-%m-%d %H:%M:%S UTC")


@dataclasses.dataclass
class Pattern:
    """A cluster of log lines sharing a template"""

    text: str
    count: int
    samples: list[Sample] = dataclasses.field(default_factory=list)
    percent: float | None = None

    @property
    def sample_count(self) -> int:
        """Number of samples kept for this pattern"""
        return len(self.samples)


def compute_percentages(patterns: list[Pattern]) -> None:
    """Set each pattern's share of the total count, in percent.

    The total count must be positive; the report loader rejects empty and
    zero-count reports before this is called.
    """
    total = sum(pattern.count for pattern in patterns)
    for pattern in patterns:
        pattern.percent = pattern.count / total * 100.0
