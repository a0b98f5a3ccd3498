import logging
from pathlib import Path

import httpx

from .changes import load_selector_index
from .files import DEFAULT_EXTENSIONS, resolve_files
from .models import FileDiffRecord, SelectorIndex, Summary
from .rewriter import rewrite_file
from .summary import SUMMARY_FILENAME, build_summary, report_summary

logger = logging.getLogger(__name__)


def rewrite_files(files: list[str], index: SelectorIndex) -> list[FileDiffRecord]:
    diffs: list[FileDiffRecord] = []
    for path in files:
        diffs.extend(rewrite_file(path, index))
    return diffs


def run_pipeline(
    changes_url: str,
    files_input: str,
    summary_path: str | Path = SUMMARY_FILENAME,
    extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS,
    client: httpx.Client | None = None,
) -> Summary:
    """Run a full rename pass and persist its summary.

    Stages run strictly in order: fetch and index the change list, resolve
    the file set, rewrite each file, then write (or remove) the summary.
    Any CssRenameError aborts the run.
    """
    index = load_selector_index(changes_url, client=client)
    files = resolve_files(files_input, extensions)
    diffs = rewrite_files(files, index)

    summary = build_summary(diffs)
    report_summary(summary, summary_path)
    return summary
