"""
Hashing Helpers

SHA-256 digests shared by the server-side proof generators and the
client-side validator, so a hash computed on one side verifies on the other.
"""

import hashlib
import string


def hash_string(text: str) -> str:
    """
    Hash text with SHA-256.

    Args:
        text: Any text, encoded as UTF-8 before hashing

    Returns:
        64 character lowercase hex digest
    """
    return hashlib.sha256(text.encode('utf-8')).hexdigest()


def position_leaf(position: int, letter: str, salt: str) -> str:
    """Hash binding a letter to a position under a salt: hash("i:L:salt")."""
    return hash_string(f"{position}:{letter}:{salt}")


def is_hex_digest(value) -> bool:
    """True if value looks like a SHA-256 hex digest."""
    if not isinstance(value, str) or len(value) != 64:
        return False
    return all(char in string.hexdigits for char in value)
