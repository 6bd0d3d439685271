"""Annotation blocks appended to target files."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

_COMMENT_PREFIX = "// "


def clean_annotation(text: str) -> str:
    """Drop a leading line-comment marker."""

    return text.replace(_COMMENT_PREFIX, "", 1) if text.startswith(_COMMENT_PREFIX) else text


def format_block(text: str, stamped_at: datetime) -> str:
    return f"\n/* {stamped_at.strftime('%Y-%m-%d %H:%M:%S')}: {clean_annotation(text)} */\n"


def append_annotation(path: Path, text: str, stamped_at: datetime) -> bool:
    """Append a timestamped comment block to ``path``.

    The file must already exist; it is never created. Returns False when
    opening or writing fails.
    """

    try:
        with open(path, "r+", encoding="utf-8") as handle:
            handle.seek(0, os.SEEK_END)
            handle.write(format_block(text, stamped_at))
    except OSError:
        logger.exception("Error writing to %s", path)
        return False
    return True


def commit_message(path: str, text: str) -> str:
    return f"Update {Path(path).name} - {clean_annotation(text)}"
