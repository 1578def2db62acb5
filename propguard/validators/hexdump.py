"""Hex dump formatter for diagnostic output.

Renders raw bytes so invisible characters (trailing whitespace, non-ASCII
bytes) become visible next to a failed pattern match.
"""

import os

BYTES_PER_ROW = 16
BYTES_PER_WORD = 4


def hex_dump(data: bytes, line_separator: str = os.linesep) -> str:
    """Render bytes as numbered rows of uppercase hex pairs.

    Each row holds 16 bytes and starts with its 1-based row number, e.g.
    ``0001  |  41 42 43 ``. An extra space follows every 4th byte. The
    output always ends with ``line_separator``; empty input yields only that.

    Args:
        data: Bytes to render (may be empty)
        line_separator: Row terminator, defaults to the platform's

    Returns:
        The formatted dump
    """
    rows = []
    for start in range(0, len(data), BYTES_PER_ROW):
        parts = [f"{start // BYTES_PER_ROW + 1:04d}  |  "]
        for offset, byte in enumerate(data[start:start + BYTES_PER_ROW], start=start + 1):
            parts.append(f"{byte:02X} ")
            if offset % BYTES_PER_WORD == 0:
                parts.append(" ")
        rows.append("".join(parts))
    return line_separator.join(rows) + line_separator
