import logging
import re
from typing import Tuple, Union

LOG = logging.getLogger(__name__)

# ----------------------------
# Board geometry
# ----------------------------

WIDTH = 17
HEIGHT = 9
SIZE = WIDTH * HEIGHT
START_INDEX = SIZE // 2

TOP_LEFT = 0
TOP_RIGHT = WIDTH - 1
BOTTOM_LEFT = WIDTH * (HEIGHT - 1)
BOTTOM_RIGHT = SIZE - 1

# Canonical SSH MD5 fingerprint: "fc:94:b0:...:b7"
FINGERPRINT_RE = re.compile(r"[0-9a-fA-F]{2}(?::[0-9a-fA-F]{2}){15}")

BinaryInput = Union[str, bytes, bytearray, memoryview]


class InvalidInputError(ValueError, TypeError):
    """Input is not a byte sequence, or the options that came with it are malformed."""


def coords_to_index(x: int, y: int) -> int:
    if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
        raise ValueError(f"improper coordinates {(x, y)!r}")
    return x + WIDTH * y


def index_to_coords(index: int) -> Tuple[int, int]:
    if not (0 <= index < SIZE):
        raise ValueError(f"improper index {index!r}")
    return index % WIDTH, index // WIDTH


# ----------------------------
# Input parsing
# ----------------------------

def parse_input(data: BinaryInput) -> bytes:
    """
    Accepts:
      1) SSH fingerprint text: exactly 16 colon separated hex pairs -> 16 bytes
      2) Any other text -> its UTF-8 bytes
      3) bytes / bytearray / memoryview -> taken as they are

    The fingerprint form must match in full; anything else, including a
    fingerprint with a missing group or a bad hex digit, is treated as
    ordinary data.

    Only str is checked for the fingerprint form. Bytes are always raw, even
    when they spell out "fc:94:..."; decode them first to get the parsed form.
    """
    if isinstance(data, str):
        if FINGERPRINT_RE.fullmatch(data) is not None:
            LOG.debug("input is an SSH fingerprint")
            return bytes.fromhex(data.replace(":", ""))
        raw = data.encode("utf-8")
        LOG.debug("input is text: utf8=%d bytes", len(raw))
        return raw

    if isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
        LOG.debug("input is binary: %d bytes", len(raw))
        return raw

    raise InvalidInputError(f"expected a string or bytes-like input, got {type(data).__name__}")
