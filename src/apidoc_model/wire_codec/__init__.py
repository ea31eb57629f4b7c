"""Wire codec exports."""

from .document_codec import (
    DocumentCodecError,
    DocumentFormat,
    decode_objects,
    detect_format,
    encode_objects,
    parse_document_text,
    render_document_text,
)

__all__ = [
    "DocumentCodecError",
    "DocumentFormat",
    "decode_objects",
    "detect_format",
    "encode_objects",
    "parse_document_text",
    "render_document_text",
]
