"""SHA-256 hashing helpers producing lowercase hex digests."""

from __future__ import annotations

import hashlib


def sha256(data: str | bytes) -> str:
    """Return the lowercase hex SHA-256 digest of ``data``.

    Text is encoded as UTF-8 before hashing.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()