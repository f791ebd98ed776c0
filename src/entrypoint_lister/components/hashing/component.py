"""
Hashing component - Content digests and Subresource Integrity strings.

Every file in a manifest is hashed with SHA-512. Variant records carry the
lowercase hex digest; file records carry the SRI form
("sha512-<base64 digest>").

Invariants:
- Pure function of the input bytes
- Read failures propagate; a missing base file is never skipped here
"""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Callable

from entrypoint_lister.core.ports import OutputDirectoryPort

HASH_ALGORITHM = "sha512"

Hasher = Callable[[bytes], str]


def sha512_hex(data: bytes) -> str:
    """Compute the hex SHA-512 digest of data."""
    return hashlib.sha512(data).hexdigest()


def hash_file(
    directory: OutputDirectoryPort,
    name: str,
    *,
    hasher: Hasher = sha512_hex,
) -> str:
    """
    Read a file from the output directory and hash its bytes.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    return hasher(directory.read_bytes(name))


def sri_from_hex(hex_digest: str, algorithm: str = HASH_ALGORITHM) -> str:
    """
    Build a Subresource Integrity string from a hex digest.

    Matches the string ssri's fromHex(...).toString() produces.
    """
    digest = bytes.fromhex(hex_digest)
    return f"{algorithm}-{base64.b64encode(digest).decode('ascii')}"


def hex_from_sri(sri: str) -> str:
    """Recover the hex digest from an SRI string."""
    _, _, encoded = sri.partition("-")
    return base64.b64decode(encoded).hex()
