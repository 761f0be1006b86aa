"""Tests for the report sources."""

import argparse
import json
import pathlib
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from patview.models.report import ReportError
from patview.report_source import (
    BUCKET,
    DEFAULT_REGION,
    FileReportSource,
    S3ReportSource,
    create_report_source,
    load_report,
    report_file_key,
)
from tests.infra.report_factory import report_item, sample_item

REPORT = json.dumps(
    [
        report_item("small", 1, []),
        report_item("big", 3, [sample_item("boom")]),
    ]
)


def _args(**overrides) -> argparse.Namespace:
    values = {
        "from_local": None,
        "namespace": None,
        "name": None,
        "year": None,
        "month": None,
        "profile": None,
        "region": DEFAULT_REGION,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_report_file_key() -> None:
    """Test the key layout of monthly reports, with a zero padded month."""
    assert (
        report_file_key("prod", "billing", 2022, 3)
        == "log-patterns-reports/prod/billing/2022/03/report.json"
    )


def test_report_file_key_two_digit_month() -> None:
    """Test that two digit months are kept as they are."""
    assert report_file_key("ns", "app", 2021, 11).endswith("/2021/11/report.json")


def test_file_source_reads_file(tmp_path: pathlib.Path) -> None:
    """Test reading a report from a local file."""
    # Arrange
    path = tmp_path / "report.json"
    path.write_text(REPORT, encoding="utf-8")
    source = FileReportSource(str(path))

    # Assert
    assert source.read() == REPORT
    assert source.get_name() == "report.json"


def test_file_source_missing_file(tmp_path: pathlib.Path) -> None:
    """Test that a missing file is reported as a ReportError."""
    # Arrange
    source = FileReportSource(str(tmp_path / "missing.json"))

    # Act / Assert
    with pytest.raises(ReportError):
        source.read()


def test_s3_source_reads_object() -> None:
    """Test fetching a report object from the bucket."""
    # Arrange
    client = MagicMock()
    client.get_object.return_value = {"Body": MagicMock(read=lambda: b"[]")}
    source = S3ReportSource("some/key.json", profile="ops", region="eu-west-1")

    # Act
    with patch("patview.report_source.boto3.Session") as session_cls:
        session_cls.return_value.client.return_value = client
        content = source.read()

    # Assert
    assert content == "[]"
    session_cls.assert_called_once_with(profile_name="ops", region_name="eu-west-1")
    session_cls.return_value.client.assert_called_once_with("s3")
    client.get_object.assert_called_once_with(Bucket=BUCKET, Key="some/key.json")
    assert source.get_name() == "some/key.json"


def test_s3_source_error_becomes_report_error() -> None:
    """Test that S3 client errors are reported as a ReportError."""
    # Arrange
    client = MagicMock()
    client.get_object.side_effect = ClientError(
        {"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject"
    )
    source = S3ReportSource("missing.json")

    # Act / Assert
    with patch("patview.report_source.boto3.Session") as session_cls:
        session_cls.return_value.client.return_value = client
        with pytest.raises(ReportError):
            source.read()


def test_create_source_prefers_local_file() -> None:
    """Test that a local file wins over remote arguments."""
    # Act
    source = create_report_source(
        _args(from_local="report.json", namespace="ns", name="app", year=2022, month=1)
    )

    # Assert
    assert isinstance(source, FileReportSource)


def test_create_source_builds_remote_key() -> None:
    """Test that remote arguments select the monthly report object."""
    # Act
    source = create_report_source(
        _args(namespace="ns", name="app", year=2022, month=4)
    )

    # Assert
    assert isinstance(source, S3ReportSource)
    assert source.get_name() == "log-patterns-reports/ns/app/2022/04/report.json"


def test_create_source_requires_remote_arguments() -> None:
    """Test that incomplete remote arguments are rejected."""
    # Act
    with pytest.raises(ReportError) as exc_info:
        create_report_source(_args(namespace="ns", year=2022))

    # Assert
    assert "name, month" in str(exc_info.value)


def test_load_report_computes_percentages(tmp_path: pathlib.Path) -> None:
    """Test that a loaded report is sorted and has its percentages."""
    # Arrange
    path = tmp_path / "report.json"
    path.write_text(REPORT, encoding="utf-8")

    # Act
    patterns = load_report(FileReportSource(str(path)))

    # Assert
    assert [p.text for p in patterns] == ["big", "small"]
    assert [p.percent for p in patterns] == [75.0, 25.0]
