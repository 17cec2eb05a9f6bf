"""File-backed storage for scrape reports."""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from processor.errors import ReportNotFoundError, StorageError
from processor.models import ScrapeRun

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def write_json_atomic(path: PathLike, document: dict) -> None:
    """
    Replace a JSON file in one step.

    The document is written to a temporary file in the same directory and
    then renamed over the target, so readers never see a partial file and
    a failed write leaves the previous file intact.

    Raises:
        StorageError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix='.tmp'
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(document, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except (OSError, TypeError, ValueError) as e:
        raise StorageError(f"Failed to write {path}: {e}") from e


def read_json(path: PathLike) -> dict:
    """
    Read a JSON document.

    Raises:
        ReportNotFoundError: If the file does not exist
        StorageError: If the file cannot be read or parsed
    """
    path = Path(path)
    if not path.exists():
        raise ReportNotFoundError(f"No data yet. Path checked: {path}")

    try:
        with path.open('r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Failed to read {path}: {e}") from e


class ReportSink:
    """Destination for a finished scrape run."""

    def persist(self, scrape_run: ScrapeRun) -> None:
        raise NotImplementedError


class FileReportSink(ReportSink):
    """Writes the latest scrape run to a single JSON file."""

    def __init__(self, path: PathLike):
        self.path = Path(path)

    def persist(self, scrape_run: ScrapeRun) -> None:
        write_json_atomic(self.path, scrape_run.to_dict())
        logger.info(f"Results saved to: {self.path}")

    def load(self) -> dict:
        return load_report(self.path)


def load_report(path: PathLike) -> dict:
    """
    Load the persisted scrape report document.

    Args:
        path: Report file path

    Returns:
        The report as a JSON-compatible dict

    Raises:
        ReportNotFoundError: If no report has been written yet
        StorageError: If the report cannot be read or parsed
    """
    document = read_json(path)
    if not isinstance(document, dict):
        raise StorageError(f"Malformed report in {path}")
    return document
