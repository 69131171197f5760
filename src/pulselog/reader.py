# ABOUTME: Log file reader for the pulselog CLI
# ABOUTME: Returns file text, or None when the file does not exist

from pathlib import Path


def read_log_file(path: Path, encoding: str = "utf-8") -> str | None:
    """
    Read a log file and return its contents.

    Args:
        path: Path to the log file
        encoding: Text encoding used to decode the file

    Returns:
        File contents, or None if the file doesn't exist.
        An existing empty file returns an empty string.
    """
    if not path.is_file():
        return None

    return path.read_text(encoding=encoding)
