"""
Field and cross-field validation for contact form values.

Validation never raises: every function returns messages as data so the
caller can highlight fields and decide whether export is allowed.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Mapping, Optional, Union
from urllib.parse import urlparse

from .config import ALLOWED_PHOTO_TYPES, MAX_PHOTO_SIZE_BYTES
from .model import EMAIL, TEL, URL, WORK_FIELDS, ContactRecord, FieldDescriptor

logger = logging.getLogger("vcard_builder")

PHOTO_KEY = "photo"
COMPANY_KEY = "company"
CALENDAR_KEY = "calendar"

MSG_REQUIRED = "This field is required."
MSG_EMAIL = "Please enter a valid email address."
MSG_URL = "Please enter a valid link."
MSG_URL_SCHEME = "Only http or https links are allowed."
MSG_CALENDAR_HTTPS = "The calendar link should be reachable via https."
MSG_TEL = "Only digits, spaces, parentheses, +, - and / are allowed."
MSG_SOCIAL_WHITESPACE = "Please enter the username without spaces."
MSG_COMPANY_REQUIRED = "Please enter your company when providing work details."
MSG_PHOTO_TYPE = "Only JPG or PNG images are supported."
MSG_PHOTO_SIZE = f"The image is too large (max {MAX_PHOTO_SIZE_BYTES // 1024} KB)."

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# Character class only; there is no minimum digit count.
TEL_PATTERN = re.compile(r"^[0-9 +()\-/]+$")
WHITESPACE = re.compile(r"\s")

ErrorSet = Dict[str, str]
Values = Union[ContactRecord, Mapping[str, str]]


def _url_error(field_id: str, value: str) -> str:
    if WHITESPACE.search(value):
        return MSG_URL
    try:
        parsed = urlparse(value)
        hostname = parsed.hostname
    except ValueError:
        return MSG_URL
    if not parsed.scheme or not hostname:
        return MSG_URL
    scheme = parsed.scheme.lower()
    if scheme not in ("http", "https"):
        return MSG_URL_SCHEME
    if field_id == CALENDAR_KEY and scheme != "https":
        return MSG_CALENDAR_HTTPS
    return ""


def compute_field_error(descriptor: FieldDescriptor, value: Optional[str]) -> str:
    """
    Return the error message for a single field, or "" when the value is fine.

    Empty optional fields are always valid; format rules only apply to values
    that were actually entered.
    """
    value = (value or "").strip()
    if not value:
        return MSG_REQUIRED if descriptor.required else ""

    if descriptor.semantic_type == EMAIL:
        return "" if EMAIL_PATTERN.match(value) else MSG_EMAIL
    if descriptor.semantic_type == URL:
        return _url_error(descriptor.id, value)
    if descriptor.semantic_type == TEL:
        return "" if TEL_PATTERN.match(value) else MSG_TEL

    if descriptor.is_social_handle:
        if value.startswith("http"):
            return _url_error(descriptor.id, value)
        if WHITESPACE.search(value):
            return MSG_SOCIAL_WHITESPACE
    return ""


def _as_values(values: Values) -> Mapping[str, str]:
    if isinstance(values, ContactRecord):
        return values.form_values()
    return values


def has_work_details(values: Values) -> bool:
    values = _as_values(values)
    return any((values.get(field_id) or "").strip() for field_id in WORK_FIELDS)


def compute_errors(
    descriptors: Iterable[FieldDescriptor],
    values: Values,
    photo_error: Optional[str] = None,
) -> ErrorSet:
    """
    Validate every described field and apply the cross-field company rule.

    :param descriptors: Field descriptors to check
    :param values: A ContactRecord or a mapping of form id to raw value
    :param photo_error: Message from the photo loader, stored under "photo"
    :return: Mapping of form id to message; empty when everything is valid
    """
    values = _as_values(values)
    errors: ErrorSet = {}

    for descriptor in descriptors:
        message = compute_field_error(descriptor, values.get(descriptor.id))
        if message:
            errors[descriptor.id] = message

    if has_work_details(values) and not (values.get(COMPANY_KEY) or "").strip():
        errors[COMPANY_KEY] = MSG_COMPANY_REQUIRED

    if photo_error:
        errors[PHOTO_KEY] = photo_error

    logger.debug("Validation found %d error(s)", len(errors))
    return errors


def has_required_names(values: Values) -> bool:
    values = _as_values(values)
    return bool((values.get("first_name") or "").strip() and (values.get("last_name") or "").strip())


def can_serialize(values: Values, errors: Mapping[str, str]) -> bool:
    """Gate for both .vcf export and QR rendering."""
    return has_required_names(values) and not errors


def validate_photo_file(mime_type: Optional[str], size: Optional[int]) -> str:
    """
    Pre-check a photo before it is read.

    :param mime_type: Detected MIME type, or None when there is no photo
    :param size: File size in bytes, or None when there is no photo
    :return: Error message, or "" when the photo may be loaded
    """
    if mime_type is None and size is None:
        return ""
    if mime_type not in ALLOWED_PHOTO_TYPES:
        return MSG_PHOTO_TYPE
    if size is not None and size > MAX_PHOTO_SIZE_BYTES:
        return MSG_PHOTO_SIZE
    return ""
