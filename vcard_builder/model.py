"""Contact record, photo payload and field descriptor types.

Every value a user can enter has a flat *form id* (``first_name``,
``adr_work_city``, ``social_twitter``...). Field descriptors, error sets and
``ContactRecord.from_form`` all speak in form ids; the record itself groups
addresses into sub-records.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Photo:
    """Inline photo payload, e.g. Photo(base64="iVBOR...", mime_subtype="PNG")."""

    base64: str
    mime_subtype: str

    def is_complete(self) -> bool:
        return bool(self.base64 and self.mime_subtype)


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""

    def is_empty(self) -> bool:
        return not any((self.street, self.city, self.state, self.zip, self.country))


ADDRESS_PARTS = ("street", "city", "state", "zip", "country")
ADDRESS_KINDS = ("home", "work")

# Platform keys double as record attributes and form id suffixes.
SOCIAL_PLATFORMS = ("facebook", "twitter", "linkedin", "instagram", "youtube", "tiktok")

SCALAR_FIELDS = (
    "prefix", "first_name", "middle_name", "last_name", "suffix", "nickname",
    "birthday", "company", "title", "website", "calendar", "notes",
    "email_home", "email_work",
    "phone_mobile", "phone_home", "phone_work", "fax_home", "fax_work",
)


def address_form_id(kind: str, part: str) -> str:
    return f"adr_{kind}_{part}"


def social_form_id(platform: str) -> str:
    return f"social_{platform}"


@dataclass(frozen=True)
class ContactRecord:
    """The one contact being edited. All text fields default to empty."""

    prefix: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    suffix: str = ""
    nickname: str = ""
    birthday: str = ""

    company: str = ""
    title: str = ""
    website: str = ""
    calendar: str = ""
    notes: str = ""

    email_home: str = ""
    email_work: str = ""
    phone_mobile: str = ""
    phone_home: str = ""
    phone_work: str = ""
    fax_home: str = ""
    fax_work: str = ""

    home: Address = field(default_factory=Address)
    work: Address = field(default_factory=Address)

    facebook: str = ""
    twitter: str = ""
    linkedin: str = ""
    instagram: str = ""
    youtube: str = ""
    tiktok: str = ""

    photo: Optional[Photo] = None

    @classmethod
    def from_form(cls, values: Mapping[str, Optional[str]], photo: Optional[Photo] = None) -> "ContactRecord":
        """Build a record from raw form values keyed by form id.

        Values are stripped; missing or ``None`` values become empty strings
        and unknown keys are ignored.
        """
        def get(key: str) -> str:
            return (values.get(key) or "").strip()

        kwargs: Dict[str, object] = {name: get(name) for name in SCALAR_FIELDS}
        for kind in ADDRESS_KINDS:
            kwargs[kind] = Address(**{part: get(address_form_id(kind, part)) for part in ADDRESS_PARTS})
        for platform in SOCIAL_PLATFORMS:
            kwargs[platform] = get(social_form_id(platform))
        kwargs["photo"] = photo
        return cls(**kwargs)

    def form_values(self) -> Dict[str, str]:
        """Flatten the record back into form ids (the photo is not a form value)."""
        values = {name: getattr(self, name) for name in SCALAR_FIELDS}
        for kind in ADDRESS_KINDS:
            address = getattr(self, kind)
            for part in ADDRESS_PARTS:
                values[address_form_id(kind, part)] = getattr(address, part)
        for platform in SOCIAL_PLATFORMS:
            values[social_form_id(platform)] = getattr(self, platform)
        return values

    def display_name(self) -> str:
        parts = [self.prefix, self.first_name, self.middle_name, self.last_name, self.suffix]
        name = " ".join(p for p in parts if p).strip()
        return name or f"{self.first_name} {self.last_name}".strip()


TEXT = "text"
EMAIL = "email"
URL = "url"
TEL = "tel"
DATE = "date"
SEMANTIC_TYPES = (TEXT, EMAIL, URL, TEL, DATE)


@dataclass(frozen=True)
class FieldDescriptor:
    id: str
    semantic_type: str = TEXT
    required: bool = False
    is_social_handle: bool = False

    def __post_init__(self):
        if self.semantic_type not in SEMANTIC_TYPES:
            raise ValueError(f"Unknown semantic type: {self.semantic_type!r}")


def _build_field_descriptors() -> Tuple[FieldDescriptor, ...]:
    types = {
        "birthday": DATE,
        "website": URL,
        "calendar": URL,
        "email_home": EMAIL,
        "email_work": EMAIL,
        "phone_mobile": TEL,
        "phone_home": TEL,
        "phone_work": TEL,
        "fax_home": TEL,
        "fax_work": TEL,
    }
    required = {"first_name", "last_name"}
    descriptors = [
        FieldDescriptor(name, types.get(name, TEXT), name in required)
        for name in SCALAR_FIELDS
    ]
    for kind in ADDRESS_KINDS:
        descriptors.extend(FieldDescriptor(address_form_id(kind, part)) for part in ADDRESS_PARTS)
    descriptors.extend(
        FieldDescriptor(social_form_id(platform), TEXT, False, True) for platform in SOCIAL_PLATFORMS
    )
    return tuple(descriptors)


FIELD_DESCRIPTORS = _build_field_descriptors()

# Presence of any of these means the contact has professional details, which
# makes the company name mandatory.
WORK_FIELDS = (
    "title",
    "website",
    "email_work",
    "phone_work",
    "fax_work",
    "calendar",
    *(address_form_id("work", part) for part in ADDRESS_PARTS),
)

