import logging
import re

from .errors import FileRewriteError
from .models import FileDiffRecord, SelectorIndex
from .utils.text import join_lines, read_file_content, split_lines, write_file_content

logger = logging.getLogger(__name__)

# Lexical match only: a dot followed by ASCII word characters or hyphens.
CLASS_SELECTOR_PATTERN = re.compile(r"\.[\w-]+", re.ASCII)


def rewrite_line(
    path: str, line: str, line_number: int, index: SelectorIndex
) -> tuple[str, list[FileDiffRecord]]:
    """Substitute indexed selectors on one line.

    Matches are taken from the original line. Each indexed match replaces the
    first occurrence of the matched text in the line as rewritten so far and
    yields one diff record, so a selector repeated on a line can produce more
    records than replacements.
    """
    diffs: list[FileDiffRecord] = []

    for selector in CLASS_SELECTOR_PATTERN.findall(line):
        change = index.get(selector)
        if change is None:
            continue

        line = line.replace(selector, change.new_selector, 1)
        diffs.append(FileDiffRecord(
            file=path,
            line=line_number,
            old_class=change.old_class,
            new_class=change.new_class,
        ))
        logger.debug(f"{path}:{line_number}: {selector} -> {change.new_selector}")

    return line, diffs


def rewrite_content(
    path: str, content: str, index: SelectorIndex
) -> tuple[str, list[FileDiffRecord]]:
    new_lines: list[str] = []
    diffs: list[FileDiffRecord] = []

    for i, line in enumerate(split_lines(content)):
        new_line, line_diffs = rewrite_line(path, line, i + 1, index)
        new_lines.append(new_line)
        diffs.extend(line_diffs)

    return join_lines(new_lines), diffs


def rewrite_file(path: str, index: SelectorIndex) -> list[FileDiffRecord]:
    """Rewrite the selectors of one file in place and return its diff records.

    The file is only written back when at least one selector was substituted.
    """
    try:
        content = read_file_content(path)
    except OSError as e:
        raise FileRewriteError(path, str(e)) from e

    new_content, diffs = rewrite_content(path, content, index)

    if diffs:
        try:
            write_file_content(path, new_content)
        except OSError as e:
            raise FileRewriteError(path, str(e)) from e
        logger.info(f"Modified: {path}")

    return diffs
