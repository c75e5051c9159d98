"""
Command-line front end: collect contact fields, validate, write a .vcf and
save the contact as an SVG QR code (offline).

Usage examples:
  # basic (will prompt for missing names)
  vcard-builder --first-name Alice --last-name Example --vcf cards/

  # everything on the command line, with a photo and no prompting
  vcard-builder --no-prompt --first-name Alice --last-name Example \\
      --company "Example Ltd" --phone-work "+1 555 0100" \\
      --social-twitter @alice --photo alice.png --out-svg alice_qr.svg

Notes:
- The vCard is VERSION:3.0 with CRLF line endings. A photo (JPG or PNG, at
  most 400 KB) is embedded inline in the .vcf, but never in the QR code.
- Sensitive fields (home email, mobile phone) are prompted for with hidden
  input if omitted, so they need not appear in the process list.
"""
from __future__ import annotations

import argparse
import getpass
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from .config import ERROR_CORRECTION_LEVELS, GeneratorSettings
from .export import resolve_vcf_path, save_vcf
from .logger import setup_logger
from .model import FIELD_DESCRIPTORS, ContactRecord, Photo
from .photo import PhotoLoaded, PhotoUnreadable, load_photo
from .preview import build_preview_model, build_vcf_preview_state
from .qr import QRPayloadTooLarge, check_qr_payload_size, generate_qr_svg
from .serializer import build_qr_payload, create_vcf_string
from .validation import can_serialize, compute_errors, has_required_names

EXIT_INVALID = 2
EXIT_QR_TOO_LARGE = 3
EXIT_WRITE_FAILED = 4

FIELD_HELP = {
    "first_name": "Given name / first name (required)",
    "last_name": "Surname / family name (required)",
    "birthday": "Birthday, YYYY-MM-DD",
    "company": "Company; required when any work detail is given",
    "calendar": "Calendar link (https only)",
    "notes": "Free-text note",
    "email_home": "Home email (sensitive; may be visible in process list)",
    "phone_mobile": "Mobile phone (sensitive; may be visible in process list)",
}

HIDDEN_PROMPTS = (
    ("email_home", "Email (optional): "),
    ("phone_mobile", "Mobile phone (optional): "),
)


def option_name(field_id: str) -> str:
    return "--" + field_id.replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a vCard 3.0 file and a QR code (offline) from contact details."
    )
    fields = p.add_argument_group("contact fields")
    for descriptor in FIELD_DESCRIPTORS:
        help_text = FIELD_HELP.get(descriptor.id)
        if help_text is None and descriptor.is_social_handle:
            help_text = "Username (@handle) or full profile URL"
        fields.add_argument(option_name(descriptor.id), dest=descriptor.id, default="", help=help_text)

    p.add_argument("--photo", default="", help="JPG or PNG file to embed (max 400 KB)")
    p.add_argument("--vcf", "-v", default=".", help="Output .vcf file or directory (default: current directory)")
    p.add_argument("--out-svg", default="vcf_qr.svg", help="Output SVG filename for QR")
    p.add_argument("--no-qr", action="store_true", help="Do not render a QR code")
    p.add_argument("--error-correction", choices=sorted(ERROR_CORRECTION_LEVELS), default="M",
                   help="QR error correction level")
    p.add_argument("--preview", action="store_true", help="Print a text preview and the vCard to stdout")
    p.add_argument("--no-prompt", action="store_true", help="Do not prompt interactively for missing values")
    p.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    p.add_argument("--log-file", default="", help="Optional file receiving DEBUG logs")
    return p


def settings_from_args(args: argparse.Namespace) -> GeneratorSettings:
    return GeneratorSettings(
        vcf_target=Path(args.vcf),
        out_svg=None if args.no_qr else Path(args.out_svg),
        render_qr=not args.no_qr,
        error_correction=args.error_correction,
        show_preview=args.preview,
        photo_path=Path(args.photo) if args.photo else None,
        prompt=not args.no_prompt,
        log_level=args.log_level,
        log_file=Path(args.log_file) if args.log_file else None,
    )


def prompt_if_missing(values: Dict[str, str]) -> Dict[str, str]:
    def ask(prompt_text, current, hide=False):
        if current:
            return current
        if hide:
            return getpass.getpass(prompt_text).strip()
        return input(prompt_text).strip()

    values["first_name"] = ask("First name: ", values.get("first_name"))
    values["last_name"] = ask("Last name: ", values.get("last_name"))
    for field_id, prompt_text in HIDDEN_PROMPTS:
        values[field_id] = ask(prompt_text, values.get(field_id), hide=True)
    return values


def print_errors(record: ContactRecord, errors: Dict[str, str]) -> None:
    if not has_required_names(record):
        print("Error: first and last name are required (--first-name, --last-name).", file=sys.stderr)
    for field_id, message in sorted(errors.items()):
        print(f"Error: {field_id}: {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    setup_logger(settings.log_level, settings.log_file)

    values = {descriptor.id: getattr(args, descriptor.id) for descriptor in FIELD_DESCRIPTORS}
    if settings.prompt:
        values = prompt_if_missing(values)

    photo: Optional[Photo] = None
    photo_error = None
    if settings.photo_path is not None:
        result = load_photo(settings.photo_path)
        if isinstance(result, PhotoLoaded):
            photo = result.photo
        elif isinstance(result, PhotoUnreadable):
            print(f"Warning: {result.reason}", file=sys.stderr)
        else:
            photo_error = result.reason

    record = ContactRecord.from_form(values, photo)
    errors = compute_errors(FIELD_DESCRIPTORS, record, photo_error)
    ready = can_serialize(record, errors)

    now = datetime.now(timezone.utc)
    vcard = create_vcf_string(record, now=now) if ready else ""

    if settings.show_preview:
        print(build_preview_model(record).render_text())
        print()
        print(build_vcf_preview_state(record, errors, vcard).text)

    if not ready:
        print_errors(record, errors)
        return EXIT_INVALID

    # nothing is written unless both outputs can be produced
    qr_payload = build_qr_payload(record, now=now)
    if settings.render_qr:
        try:
            check_qr_payload_size(qr_payload, settings.qr_error_correction)
        except QRPayloadTooLarge as e:
            print(f"Error: {e}", file=sys.stderr)
            print("Suggested fixes: shorten fields or remove optional fields.", file=sys.stderr)
            return EXIT_QR_TOO_LARGE

    try:
        vcf_path = save_vcf(vcard, resolve_vcf_path(settings.vcf_target, record))
    except OSError as e:
        print(f"Failed to write .vcf file: {e}", file=sys.stderr)
        return EXIT_WRITE_FAILED
    print(f"Saved vCard (.vcf) to {vcf_path}")

    if settings.render_qr:
        try:
            generate_qr_svg(qr_payload, settings.out_svg, settings.qr_error_correction)
        except OSError as e:
            print(f"Failed to write QR SVG: {e}", file=sys.stderr)
            return EXIT_WRITE_FAILED
        print(f"Saved QR SVG to {settings.out_svg}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
