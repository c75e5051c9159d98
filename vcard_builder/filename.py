"""Filesystem-safe file names for exported cards."""
from __future__ import annotations

import re
import unicodedata
from typing import Optional

from .config import FALLBACK_FILE_STEM
from .model import ContactRecord

_UNSAFE = re.compile(r"[^a-zA-Z0-9._-]+")
_REPEATED_UNDERSCORE = re.compile(r"_{2,}")


def build_safe_file_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """
    Derive a file stem such as "Max_Mustermann" from the contact's names.

    Accented letters are decomposed (NFKD); the combining marks fall outside
    the safe character set and are replaced along with everything else, so
    "Änne" becomes "A_nne".
    """
    base = f"{first_name or ''}_{last_name or ''}".strip()
    if base == "_":
        base = FALLBACK_FILE_STEM
    name = unicodedata.normalize("NFKD", base)
    name = _UNSAFE.sub("_", name)
    name = _REPEATED_UNDERSCORE.sub("_", name)
    name = name.strip("_")
    return name or FALLBACK_FILE_STEM


def build_safe_file_name_for(record: ContactRecord, extension: str = ".vcf") -> str:
    return build_safe_file_name(record.first_name, record.last_name) + extension
