"""Tests for QR rendering of vCard payloads."""

import base64
import logging

import pytest
import qrcode.constants

from vcard_builder import build_qr_payload
from vcard_builder.qr import (
    QRPayloadTooLarge,
    check_qr_payload_size,
    generate_qr_svg,
    max_payload_bytes,
    render_qr_data_url,
)


def test_generate_qr_svg_writes_file(tmp_path, full_record, now):
    out = generate_qr_svg(build_qr_payload(full_record, now=now), tmp_path / "qr.svg")
    assert out == tmp_path / "qr.svg"
    assert b"svg" in out.read_bytes()


def test_render_qr_data_url():
    url = render_qr_data_url("BEGIN:VCARD\r\nEND:VCARD")
    prefix = "data:image/svg+xml;base64,"
    assert url.startswith(prefix)
    assert b"svg" in base64.b64decode(url[len(prefix):])


def test_payload_limit_depends_on_error_correction():
    assert max_payload_bytes(qrcode.constants.ERROR_CORRECT_L) == 2950
    assert max_payload_bytes(qrcode.constants.ERROR_CORRECT_M) == 2331
    assert max_payload_bytes(qrcode.constants.ERROR_CORRECT_H) == 1273


def test_oversized_payload_raises():
    with pytest.raises(QRPayloadTooLarge) as excinfo:
        check_qr_payload_size("x" * 2500)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.size == 2500


def test_size_counts_utf8_bytes():
    assert check_qr_payload_size("ü" * 10) == 20


def test_large_payload_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="vcard_builder"):
        assert check_qr_payload_size("x" * 2100) == 2100
    assert "2100 bytes" in caplog.text
