"""Domain service: identifiers, SKUs and barcodes.

Record ids and barcodes are drawn from the OS random source without any
collision check; at a single shop's record volume the risk is negligible.
Barcodes carry no checksum and are not unique across variants.
"""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timedelta, timezone

from stockroom.domain.exceptions import GenerationError

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9
BARCODE_LENGTH = 12
SKU_SEGMENT_LENGTH = 3
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _draw(alphabet: str, length: int) -> str:
    try:
        return "".join(secrets.choice(alphabet) for _ in range(length))
    except NotImplementedError as exc:
        # os.urandom raises this when no randomness source exists.
        raise GenerationError("No random source available") from exc


def new_id() -> str:
    """Return a short base-36 record id, unique with high probability."""
    return _draw(ID_ALPHABET, ID_LENGTH)


def new_order_id(at: datetime | None = None) -> str:
    """Return ``ORD-<epoch millis>`` for *at* (defaults to now).

    Two orders minted in the same millisecond get the same id.
    """
    moment = at or datetime.now(timezone.utc)
    return f"ORD-{(moment - _EPOCH) // timedelta(milliseconds=1)}"


def compute_sku(brand: str, product_name: str, color: str, size: str) -> str:
    """Build ``BRD-PRO-COL-SIZE``.

    Each text segment is cut to at most three characters and uppercased;
    shorter inputs yield shorter segments. The size is appended verbatim.
    """
    segments = [
        text[:SKU_SEGMENT_LENGTH].upper() for text in (brand, product_name, color)
    ]
    return "-".join([*segments, size])


def new_barcode() -> str:
    """Return a pseudo-random 12-digit numeric string."""
    return _draw(string.digits, BARCODE_LENGTH)
