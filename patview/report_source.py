"""Sources a pattern report can be read from"""

import argparse
import logging
import os
from abc import ABC, abstractmethod

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from patview.models.pattern import Pattern, compute_percentages
from patview.models.report import ReportError, parse_report

BUCKET = "nwlogs"
REPORT_PATH = "log-patterns-reports"
DEFAULT_REGION = "cn-northwest-1"

logger = logging.getLogger(__name__)


class ReportSource(ABC):
    """Abstract report source"""

    @abstractmethod
    def read(self) -> str:
        """Read the whole report document"""

    @abstractmethod
    def get_name(self) -> str:
        """Get a short name of the source for display"""


class FileReportSource(ReportSource):
    """Report stored in a local file"""

    def __init__(self, path: str) -> None:
        self._path = path

    def read(self) -> str:
        try:
            with open(self._path, "r", encoding="utf-8") as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReportError(f"Cannot read report file '{self._path}': {e}") from e

    def get_name(self) -> str:
        return os.path.basename(self._path)


class S3ReportSource(ReportSource):
    """Report stored as an object in an S3 bucket"""

    def __init__(
        self,
        key: str,
        bucket: str = BUCKET,
        profile: str | None = None,
        region: str = DEFAULT_REGION,
    ) -> None:
        self._key = key
        self._bucket = bucket
        self._profile = profile
        self._region = region

    def read(self) -> str:
        logger.info("Fetching s3://%s/%s", self._bucket, self._key)
        if self._profile:
            logger.info("Using profile %s", self._profile)
        try:
            session = boto3.Session(
                profile_name=self._profile, region_name=self._region
            )
            response = session.client("s3").get_object(
                Bucket=self._bucket, Key=self._key
            )
            body = response["Body"].read()
        except (BotoCoreError, ClientError) as e:
            raise ReportError(
                f"Cannot fetch report s3://{self._bucket}/{self._key}: {e}"
            ) from e
        return body.decode("utf-8", errors="replace")

    def get_name(self) -> str:
        return self._key


def report_file_key(namespace: str, app: str, year: int, month: int) -> str:
    """Build the key of a monthly report in the reports bucket"""
    return f"{REPORT_PATH}/{namespace}/{app}/{year}/{month:02}/report.json"


def create_report_source(args: argparse.Namespace) -> ReportSource:
    """Choose the report source from the command line arguments"""
    if args.from_local:
        return FileReportSource(args.from_local)

    missing = [
        name
        for name in ("namespace", "name", "year", "month")
        if getattr(args, name) is None
    ]
    if missing:
        raise ReportError(
            "namespace, name, year and month must be set to read a remote report"
            f" (missing: {', '.join(missing)})"
        )
    key = report_file_key(args.namespace, args.name, args.year, args.month)
    return S3ReportSource(key, profile=args.profile, region=args.region)


def load_report(source: ReportSource) -> list[Pattern]:
    """Read a report from a source and compute the pattern percentages"""
    logger.info("Reading report from %s", source.get_name())
    patterns = parse_report(source.read())
    compute_percentages(patterns)
    logger.info(
        "Loaded %d patterns with %d samples",
        len(patterns),
        sum(pattern.sample_count for pattern in patterns),
    )
    return patterns
