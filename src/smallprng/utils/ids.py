"""
ids.py
------

Opaque identifier encoding for random blobs.

The textual form is self-checking: the blob is prefixed with its CRC-32
(big-endian), base32 encoded (RFC 4648 alphabet, lowercase, no padding) and
grouped into dash-separated chunks of five characters, e.g.
``"aaaaa-aa"`` for the empty blob.

Examples
--------
>>> from smallprng.utils.ids import decode_opaque_id, encode_opaque_id
>>> text = encode_opaque_id(bytes(range(10)))
>>> decode_opaque_id(text) == bytes(range(10))
True
"""

from __future__ import annotations

import base64
import zlib

GROUP_SIZE = 5


def encode_opaque_id(blob: bytes) -> str:
    """
    Encode ``blob`` as a checksummed, dash-grouped base32 string.

    Parameters
    ----------
    blob : bytes
        Raw identifier bytes.

    Returns
    -------
    str
        Lowercase text identifier.
    """
    blob = bytes(blob)
    checksum = zlib.crc32(blob).to_bytes(4, "big")
    text = base64.b32encode(checksum + blob).decode("ascii").rstrip("=").lower()
    return "-".join(
        text[i : i + GROUP_SIZE] for i in range(0, len(text), GROUP_SIZE)
    )


def decode_opaque_id(text: str) -> bytes:
    """
    Invert ``encode_opaque_id``.

    Raises
    ------
    ValueError
        If ``text`` is not valid base32 or its checksum does not match.
    """
    compact = text.replace("-", "").upper()
    compact += "=" * (-len(compact) % 8)
    try:
        raw = base64.b32decode(compact)
    except ValueError as exc:
        raise ValueError(f"malformed identifier: {text!r}") from exc
    if len(raw) < 4:
        raise ValueError(f"identifier too short: {text!r}")
    checksum, blob = raw[:4], raw[4:]
    if zlib.crc32(blob).to_bytes(4, "big") != checksum:
        raise ValueError(f"checksum mismatch in identifier: {text!r}")
    if encode_opaque_id(blob) != text:
        raise ValueError(f"non-canonical identifier: {text!r}")
    return blob
