"""Locate every non-overlapping occurrence of a byte pattern."""


def find_all_positions(buffer: bytes | bytearray, pattern: bytes) -> list[int]:
    """Return ascending offsets of non-overlapping occurrences of ``pattern``.

    After a match at ``p`` the scan resumes at ``p + len(pattern)``.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    positions: list[int] = []
    pos = buffer.find(pattern)
    while pos != -1:
        positions.append(pos)
        pos = buffer.find(pattern, pos + len(pattern))
    return positions
