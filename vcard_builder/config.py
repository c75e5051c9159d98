"""
Constants and runtime settings for the vCard builder.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import qrcode.constants


PRODID = "-//vCard Builder//EN"
FOLD_WIDTH = 75
LINE_ENDING = "\r\n"

FALLBACK_FILE_STEM = "kontakt"

MAX_PHOTO_SIZE_BYTES = 400 * 1024
ALLOWED_PHOTO_TYPES = ("image/jpeg", "image/png")

WARN_QR_BYTES = 2000
MAX_QR_BYTES = 2950  # conservative practical limit for QR payloads

# Byte-mode capacity of the largest QR version (40) per error correction level
QR_BYTE_CAPACITY = {
    qrcode.constants.ERROR_CORRECT_L: 2953,
    qrcode.constants.ERROR_CORRECT_M: 2331,
    qrcode.constants.ERROR_CORRECT_Q: 1663,
    qrcode.constants.ERROR_CORRECT_H: 1273,
}

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


@dataclass
class GeneratorSettings:
    """Output options for one CLI run."""

    # Output
    vcf_target: Path = Path(".")
    out_svg: Optional[Path] = Path("vcf_qr.svg")
    render_qr: bool = True
    error_correction: str = "M"
    show_preview: bool = False

    # Input
    photo_path: Optional[Path] = None
    prompt: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @property
    def qr_error_correction(self) -> int:
        return ERROR_CORRECTION_LEVELS[self.error_correction.upper()]
