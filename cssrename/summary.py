import json
import logging
from pathlib import Path

from .errors import SummaryWriteError
from .models import FileDiffRecord, Summary

logger = logging.getLogger(__name__)

SUMMARY_FILENAME = "changes-summary.json"


def build_summary(diffs: list[FileDiffRecord]) -> Summary:
    modified_files: list[str] = []
    for diff in diffs:
        if diff.file not in modified_files:
            modified_files.append(diff.file)
    return Summary(modified_files=modified_files, changes=list(diffs))


def dump_summary(summary: Summary) -> str:
    return json.dumps(summary.to_json_dict(), indent=2)


def write_summary(summary: Summary, path: str | Path = SUMMARY_FILENAME) -> Path:
    path = Path(path)
    try:
        path.write_text(dump_summary(summary), encoding="utf-8")
    except OSError as e:
        raise SummaryWriteError(str(path), str(e)) from e
    logger.info(f"Wrote summary to {path}")
    return path


def remove_summary(path: str | Path = SUMMARY_FILENAME) -> bool:
    path = Path(path)
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise SummaryWriteError(str(path), str(e)) from e
    logger.info(f"Removed stale summary {path}")
    return True


def report_summary(summary: Summary, path: str | Path = SUMMARY_FILENAME) -> bool:
    """Persist the summary, or remove a stale one when nothing changed.

    Returns whether the run changed anything.
    """
    logger.info(f"Total changes: {summary.total_changes}")
    logger.info(f"Modified files: {len(summary.modified_files)}")

    if not summary.has_changes:
        remove_summary(path)
        return False

    write_summary(summary, path)
    return True
