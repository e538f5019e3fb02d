import base64
import binascii
import re

from rsaio.common.errors import KeyFormatError

# make sure string only has legal standard Base64 characters, "=" only at the end
_B64_RE = re.compile(rb'^[A-Za-z0-9+/]*={0,2}$')

# deliberately lenient: surrounding whitespace (an editor newline) is stripped
# before the strict check. Unpadded text is still rejected.
_WS = b" \t\r\n"


def b64(b: bytes) -> str:
    # RFC 4648 alphabet, padded, single line
    return base64.b64encode(b).decode("ascii")


def ub64(s, path=None) -> bytes:
    if isinstance(s, str):
        try:
            s = s.encode("ascii")
        except UnicodeEncodeError as exc:
            raise KeyFormatError("not base64 text", path) from exc
    s = bytes(s).strip(_WS)
    if not is_b64(s):
        raise KeyFormatError("not base64 text", path)
    try:
        return base64.b64decode(s, validate=True)
    except binascii.Error as exc:
        raise KeyFormatError(f"bad base64 padding: {exc}", path) from exc


def is_b64(s) -> bool:
    if isinstance(s, str):
        s = s.encode("ascii", "replace")
    # check if characters and length are legal for padded base64
    return bool(_B64_RE.match(s)) and len(s) % 4 == 0
