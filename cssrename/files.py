import glob
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".css",)


def split_patterns(files_input: str) -> list[str]:
    return [p.strip() for p in files_input.split(",")]


def expand_directory(directory: str, extensions: tuple[str, ...] | list[str]) -> list[str]:
    matches: list[str] = []
    for ext in extensions:
        matches.extend(glob.glob(os.path.join(directory, "**", f"*{ext}"), recursive=True))
    return sorted(m for m in matches if os.path.isfile(m))


def expand_pattern(
    pattern: str, extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS
) -> list[str]:
    """Expand a single path pattern to the files it names.

    An existing file is returned as is. An existing directory is searched
    recursively for files ending in one of the extensions. Anything else is
    treated as a glob (``**`` recurses). Only regular files are returned and a
    pattern that matches nothing yields an empty list.
    """
    if not pattern:
        return []

    if os.path.exists(pattern):
        if os.path.isfile(pattern):
            return [pattern]
        if os.path.isdir(pattern):
            return expand_directory(pattern, extensions)
        return []

    matches = glob.glob(pattern, recursive=True)
    return [m for m in sorted(matches) if os.path.isfile(m)]


def resolve_files(
    files_input: str, extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS
) -> list[str]:
    """Resolve a comma-separated list of files, directories and globs.

    Patterns are expanded in order and files named by more than one pattern
    are kept once per pattern.
    """
    files: list[str] = []
    for pattern in split_patterns(files_input):
        matched = expand_pattern(pattern, extensions)
        logger.debug(f"Pattern {pattern!r} matched {len(matched)} file(s)")
        files.extend(matched)

    logger.info(f"Found {len(files)} files to check")
    return files
