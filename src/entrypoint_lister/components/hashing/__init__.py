"""
Hashing component - Content digests and Subresource Integrity strings.
"""

from .component import (
    HASH_ALGORITHM,
    Hasher,
    hash_file,
    hex_from_sri,
    sha512_hex,
    sri_from_hex,
)

__all__ = [
    "HASH_ALGORITHM",
    "Hasher",
    "hash_file",
    "hex_from_sri",
    "sha512_hex",
    "sri_from_hex",
]
