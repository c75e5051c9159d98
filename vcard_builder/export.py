"""Writing generated cards to disk."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .filename import build_safe_file_name_for
from .model import ContactRecord

logger = logging.getLogger("vcard_builder")


def resolve_vcf_path(target: Union[str, Path], record: ContactRecord) -> Path:
    """A directory target gets a file name derived from the contact's names."""
    target = Path(target)
    if target.is_dir():
        return target / build_safe_file_name_for(record)
    return target


def save_vcf(vcard_text: str, path: Union[str, Path]) -> Path:
    path = Path(path)
    data = vcard_text.encode("utf-8")
    # write CRLF explicitly as bytes to avoid platform translation surprises
    with open(path, "wb") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
