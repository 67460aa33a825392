import re
from urllib.parse import parse_qsl

from payments.errors import ParseError
from payments.fields import FieldMultimap

# "%" not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_response(body: bytes | str) -> FieldMultimap:
    """
    Decode an NVP response body (``KEY1=VAL1&KEY2=VAL2``) into a FieldMultimap.

    Repeated keys accumulate in order. A segment without ``=`` maps to an
    empty value and empty segments are skipped. An empty body yields an empty
    multimap; deciding whether that is a failure is the classifier's job.

    Raises:
        ParseError: when the body contains malformed percent-encoding
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    fields = FieldMultimap()
    if not body:
        return fields

    bad = _BAD_ESCAPE.search(body)
    if bad:
        raise ParseError(
            f"invalid percent-encoding at offset {bad.start()}: "
            f"{body[bad.start():bad.start() + 3]!r}"
        )

    fields.update(parse_qsl(body, keep_blank_values=True))
    return fields
