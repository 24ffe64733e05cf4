from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from clidle.errors import FatalResourceError

logger = logging.getLogger(__name__)


def read_buffer(p: Path | str) -> bytes:
    """
    Read a word-list file as raw bytes for zero-copy tokenizing.
    Raises FatalResourceError if the file is missing or unreadable.
    """
    p = Path(p)
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.error("cannot read word list %s: %s", p, e)
        raise FatalResourceError(f"{p}: {e.strerror or e}") from e
    logger.debug("read %d bytes from %s", len(data), p)
    return data


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
