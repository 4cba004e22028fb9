"""
File utilities for the deck workflow.

Writes go to a temporary file beside the target and are moved into place, so
an interrupted run never leaves a truncated token cache or PDF behind.
"""

import os
from pathlib import Path
from tempfile import NamedTemporaryFile


def _atomic_write(path: Path, data, mode: str, **open_kwargs) -> None:
    with NamedTemporaryFile(mode, delete=False, dir=str(path.parent), **open_kwargs) as tmp:
        tmp.write(data)
        tmp_name = tmp.name
    try:
        os.replace(tmp_name, path)
    except OSError:
        os.unlink(tmp_name)
        raise


def write_bytes(path: Path, content: bytes) -> None:
    _atomic_write(Path(path), content, "wb")


def write_text(path: Path, content: str) -> None:
    _atomic_write(Path(path), content, "w", encoding="utf-8")
