"""Shared fixtures: a fully populated contact and a fixed REV timestamp."""

import logging
from datetime import datetime, timezone

import pytest

from vcard_builder import Address, ContactRecord, Photo

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers the CLI installs so they do not outlive the test."""
    yield
    logger = logging.getLogger("vcard_builder")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def full_record() -> ContactRecord:
    return ContactRecord(
        prefix="Dr.",
        first_name="Max",
        middle_name="Alexander",
        last_name="Mustermann",
        suffix="MBA",
        nickname="Maxi",
        birthday="1985-07-01",
        company="Beispiel GmbH",
        title="Marketing Manager",
        website="https://example.com",
        calendar="https://calendar.example.com",
        notes="Mehrzeilige\nNotiz",
        email_home="max@example.com",
        email_work="max@firma.de",
        phone_mobile="+49 170 9876543",
        phone_home="+49 30 1234567",
        phone_work="+49 40 1234567",
        fax_home="+49 30 7654321",
        fax_work="+49 40 7654321",
        home=Address("Privatstraße 1", "Berlin", "Berlin", "10115", "Deutschland"),
        work=Address("Arbeitsweg 5", "Hamburg", "Hamburg", "20095", "Deutschland"),
        facebook="beispiel",
        twitter="@beispiel",
        linkedin="https://www.linkedin.com/in/beispiel",
        instagram="insta_handle",
        youtube="kanal",
        tiktok="tiktokuser",
        photo=Photo(base64="abcd", mime_subtype="PNG"),
    )
