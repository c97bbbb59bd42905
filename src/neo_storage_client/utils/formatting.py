"""Display formatting helpers."""

from typing import Optional

SIZE_UNITS = ["B", "KB", "MB", "GB"]


def human_size(num_bytes: Optional[int] = 0) -> str:
    """Format a byte count with binary (1024) unit scaling.

    Bytes are always whole numbers. Scaled values below 10 keep one decimal
    place, values of 10 or more are rounded to whole units.

    >>> human_size(1536)
    '1.5 KB'
    >>> human_size(50 * 1024 * 1024)
    '50 MB'
    """
    if not num_bytes:
        return "0 B"

    value = float(num_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    decimals = 0 if value >= 10 or unit_index == 0 else 1
    return f"{value:.{decimals}f} {SIZE_UNITS[unit_index]}"


def progress_percent(loaded: int, total: int) -> int:
    """Whole-number percentage of ``loaded`` over ``total`` (half rounds up)."""
    if total <= 0:
        return 0
    return int(loaded * 100 / total + 0.5)
