"""
QR rendering of vCard payloads (offline, SVG).

Requires: qrcode (pip install qrcode)
"""
from __future__ import annotations

import base64
import io
import logging
from pathlib import Path
from typing import Union

import qrcode
import qrcode.constants
from qrcode.image.svg import SvgPathImage

from .config import MAX_QR_BYTES, QR_BYTE_CAPACITY, WARN_QR_BYTES

logger = logging.getLogger("vcard_builder")


class QRPayloadTooLarge(ValueError):
    """The payload would produce a QR code too dense to scan reliably."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"vCard content is too large for a practical QR (~{size} bytes, "
            f"limit {limit}). Shorten fields or remove content."
        )
        self.size = size
        self.limit = limit


def max_payload_bytes(error_correction: int = qrcode.constants.ERROR_CORRECT_M) -> int:
    return min(MAX_QR_BYTES, QR_BYTE_CAPACITY[error_correction])


def check_qr_payload_size(payload: str, error_correction: int = qrcode.constants.ERROR_CORRECT_M) -> int:
    """Return the UTF-8 size of the payload; raise QRPayloadTooLarge past the limit."""
    length = len(payload.encode("utf-8"))
    limit = max_payload_bytes(error_correction)
    if length > limit:
        raise QRPayloadTooLarge(length, limit)
    if length > WARN_QR_BYTES:
        logger.warning(
            "vCard content is approximately %d bytes. Large payloads may produce "
            "dense QR codes that some scanners struggle to read.", length
        )
    return length


def make_qr(payload: str, error_correction: int = qrcode.constants.ERROR_CORRECT_M) -> qrcode.QRCode:
    check_qr_payload_size(payload, error_correction)
    qr = qrcode.QRCode(
        version=None,
        error_correction=error_correction,
        box_size=10,
        border=4,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    logger.debug("QR code version %d for %d characters", qr.version, len(payload))
    return qr


def generate_qr_svg(
    payload: str,
    out_path: Union[str, Path],
    error_correction: int = qrcode.constants.ERROR_CORRECT_M,
) -> Path:
    out_path = Path(out_path)
    img = make_qr(payload, error_correction).make_image(image_factory=SvgPathImage)
    with open(out_path, "wb") as f:
        img.save(f)
    logger.debug("Wrote QR SVG to %s", out_path)
    return out_path


def render_qr_data_url(payload: str, error_correction: int = qrcode.constants.ERROR_CORRECT_M) -> str:
    """Render the payload as an SVG data URL, e.g. for embedding in HTML."""
    img = make_qr(payload, error_correction).make_image(image_factory=SvgPathImage)
    buffer = io.BytesIO()
    img.save(buffer)
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"
