"""vCard 3.0 generation with validation, photo embedding and QR export."""

from .filename import build_safe_file_name, build_safe_file_name_for
from .model import (
    FIELD_DESCRIPTORS,
    WORK_FIELDS,
    Address,
    ContactRecord,
    FieldDescriptor,
    Photo,
)
from .photo import PhotoLoaded, PhotoRejected, PhotoUnreadable, load_photo
from .preview import build_preview_model, build_vcf_preview_state
from .serializer import build_qr_payload, create_vcf_string
from .text import escape_vcf, fold_line, format_date_for_vcf
from .validation import can_serialize, compute_errors, compute_field_error, validate_photo_file

__all__ = [
    "Address",
    "ContactRecord",
    "FIELD_DESCRIPTORS",
    "FieldDescriptor",
    "Photo",
    "PhotoLoaded",
    "PhotoRejected",
    "PhotoUnreadable",
    "WORK_FIELDS",
    "build_preview_model",
    "build_qr_payload",
    "build_safe_file_name",
    "build_safe_file_name_for",
    "build_vcf_preview_state",
    "can_serialize",
    "compute_errors",
    "compute_field_error",
    "create_vcf_string",
    "escape_vcf",
    "fold_line",
    "format_date_for_vcf",
    "load_photo",
    "validate_photo_file",
]
