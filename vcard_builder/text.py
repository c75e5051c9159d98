"""
Text helpers shared by the serializer: value escaping, line folding and
birthday compaction.
"""
from __future__ import annotations

import re
from typing import Optional

from .config import FOLD_WIDTH, LINE_ENDING

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_NEWLINE = re.compile(r"\r\n|\r|\n")


def escape_vcf(s: Optional[str]) -> str:
    if not s:
        return ""
    # backslash must go first
    s = s.replace("\\", "\\\\")
    s = s.replace(",", "\\,")
    s = s.replace(";", "\\;")
    s = _NEWLINE.sub(r"\\n", s)
    return s


def fold_line(line: str, width: int = FOLD_WIDTH, line_ending: str = LINE_ENDING) -> str:
    """
    Fold one content line: the first segment holds `width` characters, every
    continuation starts with a single space followed by up to `width - 1`
    characters, so each physical line stays within `width`.

    Length is counted in code points; a character is never split.
    """
    if len(line) <= width:
        return line
    parts = [line[:width]]
    step = width - 1
    for i in range(width, len(line), step):
        parts.append(line[i:i + step])
    return (line_ending + " ").join(parts)


def format_date_for_vcf(value: Optional[str]) -> str:
    """Compact an ISO YYYY-MM-DD date to YYYYMMDD; other shapes pass through."""
    if not value:
        return ""
    if _ISO_DATE.match(value):
        return value.replace("-", "")
    return value
