"""Single-byte XOR cipher used to obfuscate sensor payloads."""

from __future__ import annotations


def xor_encrypt(data: bytes | bytearray | memoryview, key: int) -> bytes:
    """Return ``data`` with every byte XORed against ``key``.

    The operation is its own inverse: applying it twice with the same key
    returns the original bytes. This is obfuscation, not real encryption.
    """
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError("key must be an integer")
    if not 0 <= key <= 0xFF:
        raise ValueError(f"key must be in the range 0..255, got {key}")
    return bytes(byte ^ key for byte in bytes(data))