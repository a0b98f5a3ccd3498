from pathlib import Path

# Undecodable bytes survive a read/write round trip unchanged.
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


def read_file_content(path: str | Path) -> str:
    with open(path, encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="") as f:
        return f.read()


def write_file_content(path: str | Path, content: str) -> None:
    with open(path, "w", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="") as f:
        f.write(content)


def split_lines(content: str) -> list[str]:
    """Split on newlines only, so a trailing newline yields a final empty line."""
    return content.split("\n")


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)
