"""Human-readable previews of the contact and of the generated vCard text."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Tuple

from .model import SOCIAL_PLATFORMS, ContactRecord
from .serializer import address_label_lines, social_profile_url
from .validation import Values, has_required_names

NAME_PLACEHOLDER = "Name appears here"
MSG_NEED_NAMES = "Fill in at least first and last name to see the vCard."
MSG_FIX_ERRORS = "Please fix the highlighted errors to see the vCard."

CONTACT_LABELS = (
    ("email_home", "Email (home)"),
    ("email_work", "Email (work)"),
    ("phone_mobile", "Mobile"),
    ("phone_home", "Phone (home)"),
    ("phone_work", "Phone (work)"),
    ("fax_home", "Fax (home)"),
    ("fax_work", "Fax (work)"),
    ("website", "Website"),
    ("calendar", "Calendar"),
    ("birthday", "Birthday"),
)

PLATFORM_LABELS = {
    "facebook": "Facebook",
    "twitter": "X",
    "linkedin": "LinkedIn",
    "instagram": "Instagram",
    "youtube": "YouTube",
    "tiktok": "TikTok",
}


@dataclass(frozen=True)
class AddressItem:
    label: str
    lines: Tuple[str, ...]


@dataclass(frozen=True)
class PreviewModel:
    name: str
    role: str = ""
    company: str = ""
    contact_items: List[Tuple[str, str]] = field(default_factory=list)
    address_items: List[AddressItem] = field(default_factory=list)
    social_items: List[Tuple[str, str]] = field(default_factory=list)
    notes: str = ""

    @property
    def show_notes(self) -> bool:
        return bool(self.notes)

    def render_text(self) -> str:
        out = [self.name]
        headline = " @ ".join(p for p in (self.role, self.company) if p)
        if headline:
            out.append(headline)
        for label, value in self.contact_items:
            out.append(f"{label}: {value}")
        for item in self.address_items:
            out.append(f"{item.label}: " + ", ".join(item.lines))
        for label, url in self.social_items:
            out.append(f"{label}: {url}")
        if self.show_notes:
            out.append("")
            out.append(self.notes)
        return "\n".join(out)


def build_preview_model(record: ContactRecord) -> PreviewModel:
    contact_items = [
        (label, getattr(record, name)) for name, label in CONTACT_LABELS if getattr(record, name)
    ]
    address_items = []
    for label, address in (("Home", record.home), ("Work", record.work)):
        lines = address_label_lines(address)
        if lines:
            address_items.append(AddressItem(label, tuple(lines)))
    social_items = [
        (PLATFORM_LABELS[platform], social_profile_url(platform, getattr(record, platform)))
        for platform in SOCIAL_PLATFORMS
        if getattr(record, platform).strip()
    ]
    return PreviewModel(
        name=record.display_name() or NAME_PLACEHOLDER,
        role=record.title,
        company=record.company,
        contact_items=contact_items,
        address_items=address_items,
        social_items=social_items,
        notes=record.notes,
    )


@dataclass(frozen=True)
class VcfPreviewState:
    placeholder: bool
    text: str


def build_vcf_preview_state(values: Values, errors: Mapping[str, str], vcf_text: str) -> VcfPreviewState:
    """
    Pick one of three preview states: names missing, errors to fix, or the
    finished vCard text.
    """
    if not has_required_names(values):
        return VcfPreviewState(True, MSG_NEED_NAMES)
    if errors:
        return VcfPreviewState(True, MSG_FIX_ERRORS)
    return VcfPreviewState(False, vcf_text)
