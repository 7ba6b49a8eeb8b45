"""Percent-encoding of test labels into single path segments."""

import re
from urllib.parse import quote, unquote

EMPTY_LABEL_SEGMENT = "%"
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class LabelCodecError(ValueError):
    """Raised when a segment is not a valid percent-encoded label."""

    def __init__(self, segment: str, reason: str) -> None:
        super().__init__(f"Cannot decode label segment {segment!r}: {reason}")
        self.segment = segment


def encode_segment(label: str) -> str:
    """Encode a label so it can be used as exactly one path segment.

    Every reserved and non-ASCII character is escaped, so the result never
    contains ``/``. Segments made only of dots are escaped as well, so no
    encoded segment can be mistaken for ``.`` or ``..``. The empty label
    becomes a lone ``%``, which no other label encodes to.
    """
    if not label:
        return EMPTY_LABEL_SEGMENT
    encoded = quote(label, safe="")
    if encoded.strip(".") == "":
        encoded = "%2E" * len(encoded)
    return encoded


def decode_segment(segment: str) -> str:
    """Decode a segment produced by :func:`encode_segment`.

    Raises:
        LabelCodecError: If the segment has a malformed escape sequence or
            the escapes do not form valid UTF-8.

    """
    if segment == EMPTY_LABEL_SEGMENT:
        return ""
    match = _MALFORMED_ESCAPE.search(segment)
    if match:
        raise LabelCodecError(
            segment, f"malformed escape at position {match.start()}"
        )
    try:
        return unquote(segment, errors="strict")
    except UnicodeDecodeError as exc:
        raise LabelCodecError(segment, "escapes are not valid UTF-8") from exc
