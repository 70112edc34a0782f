"""File utilities."""
from __future__ import annotations

from pathlib import Path


def ensure_dir(path: str) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def read_text_file(path: str) -> str:
    """Read a file as UTF-8.

    Raises FileNotFoundError for a missing path and ValueError when the
    bytes are not valid UTF-8 so callers can treat both as a bad file.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Unable to read text file: {p.name}") from exc
