"""
vCard 3.0 serialization.

Lines are assembled one at a time, escaped, folded individually and joined
with CRLF. Apart from the REV timestamp the output depends only on the
record, so two calls with the same record and the same `now` are identical.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from .config import LINE_ENDING, PRODID
from .model import SOCIAL_PLATFORMS, Address, ContactRecord
from .text import escape_vcf, fold_line, format_date_for_vcf

logger = logging.getLogger("vcard_builder")

SOCIAL_URL_TEMPLATES = {
    "facebook": "https://facebook.com/{handle}",
    "twitter": "https://x.com/{handle}",
    "linkedin": "https://linkedin.com/in/{handle}",
    "instagram": "https://instagram.com/{handle}",
    "youtube": "https://youtube.com/@{handle}",
    "tiktok": "https://tiktok.com/@{handle}",
}


def is_http_url(s: str) -> bool:
    return bool(s) and s.startswith("http")


def format_rev(now: Optional[datetime] = None) -> str:
    """ISO-8601 basic UTC timestamp, e.g. 20261019T120000Z."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y%m%dT%H%M%SZ")


def social_profile_url(platform: str, value: str) -> str:
    url = value.strip()
    if is_http_url(url):
        return url
    handle = url[1:] if url.startswith("@") else url
    template = SOCIAL_URL_TEMPLATES.get(platform, "https://" + platform + ".com/{handle}")
    return template.format(handle=handle)


def address_label_lines(address: Address) -> List[str]:
    """Human-readable address: street / "zip city" / "state, country"."""
    lines = [
        address.street,
        " ".join(p for p in (address.zip, address.city) if p),
        ", ".join(p for p in (address.state, address.country) if p),
    ]
    return [line for line in lines if line]


class _Lines:
    """Collects folded content lines."""

    def __init__(self):
        self.lines: List[str] = []

    def raw(self, line: str) -> None:
        self.lines.append(fold_line(line))

    def field(self, key: str, value: Optional[str], transform=None) -> None:
        if not value:
            return
        if transform is not None:
            value = transform(value)
            if not value:
                return
        self.raw(f"{key}:{escape_vcf(value)}")

    def address(self, kind: str, address: Address) -> None:
        if address.is_empty():
            return
        components = ["", ""] + [
            escape_vcf(part)
            for part in (address.street, address.city, address.state, address.zip, address.country)
        ]
        self.raw(f"ADR;TYPE={kind}:{';'.join(components)}")

        label = "\n".join(address_label_lines(address))
        if label:
            self.raw(f"LABEL;TYPE={kind}:{escape_vcf(label)}")

    def social(self, platform: str, value: Optional[str]) -> None:
        if not value or not value.strip():
            return
        url = social_profile_url(platform, value)
        self.raw(f"X-SOCIALPROFILE;TYPE={platform}:{escape_vcf(url)}")

    def joined(self) -> str:
        return LINE_ENDING.join(self.lines)


def create_vcf_string(
    record: ContactRecord,
    now: Optional[datetime] = None,
    include_photo: bool = True,
) -> str:
    """
    Render a contact record as vCard 3.0 text.

    :param record: The contact to serialize
    :param now: Timestamp for the REV line (defaults to the current UTC time)
    :param include_photo: Whether to embed the photo as a base64 PHOTO line
    :return: CRLF-joined vCard text without a trailing line break
    """
    out = _Lines()
    out.raw("BEGIN:VCARD")
    out.raw("VERSION:3.0")
    out.raw(f"PRODID:{PRODID}")
    out.raw(f"REV:{format_rev(now)}")

    n = ";".join(
        escape_vcf(part)
        for part in (record.last_name, record.first_name, record.middle_name, record.prefix, record.suffix)
    )
    out.raw(f"N:{n}")
    out.raw(f"FN:{escape_vcf(record.display_name())}")

    out.field("NICKNAME", record.nickname)
    out.field("BDAY", record.birthday, format_date_for_vcf)
    out.field("ORG", record.company)
    out.field("TITLE", record.title)
    out.field("URL", record.website)
    out.field("CALURI", record.calendar)
    out.field("NOTE", record.notes)

    out.field("EMAIL;TYPE=HOME", record.email_home)
    out.field("EMAIL;TYPE=WORK", record.email_work)

    out.field("TEL;TYPE=CELL", record.phone_mobile)
    out.field("TEL;TYPE=HOME", record.phone_home)
    out.field("TEL;TYPE=WORK", record.phone_work)
    out.field("TEL;TYPE=FAX,HOME", record.fax_home)
    out.field("TEL;TYPE=FAX,WORK", record.fax_work)

    out.address("HOME", record.home)
    out.address("WORK", record.work)

    for platform in SOCIAL_PLATFORMS:
        out.social(platform, getattr(record, platform))

    photo = record.photo
    if include_photo and photo is not None and photo.is_complete():
        # base64 is not escaped; its alphabet has no reserved characters
        out.raw(f"PHOTO;ENCODING=b64;TYPE={photo.mime_subtype}:{photo.base64}")

    out.raw("END:VCARD")
    logger.debug("Serialized vCard with %d content lines", len(out.lines))
    return out.joined()


def build_qr_payload(record: ContactRecord, now: Optional[datetime] = None) -> str:
    """The text encoded into the QR code; the photo is left out to keep it scannable."""
    return create_vcf_string(record, now=now, include_photo=False)
