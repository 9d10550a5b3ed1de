"""Printable preview of the bytes around a match."""


def get_context(buffer: bytes | bytearray, position: int, length: int, size: int = 25) -> str:
    """Return ``size`` bytes either side of a match, non-printable bytes shown as ``.``."""
    start = max(0, position - size)
    end = min(len(buffer), position + length + size)
    return "".join(chr(c) if 32 <= c < 127 else "." for c in buffer[start:end])
