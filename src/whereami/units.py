"""Unit formatting for sizes and boot time."""

from whereami.models import BootTime

# Lower bound of each band. Note the GB step is 1_048_574, not 1024**2, and
# values under the first bound are labelled KB without being divided.
BYTE_THRESHOLDS: tuple[int, ...] = (
    1024,  # 1 MB
    1_048_574,  # 1 GB
    1_073_741_824,  # 1 TB
    1_099_511_627_776,  # 1 PB
    1_125_899_906_842_624,  # 1 EB
    11_258_999_068_426_240,  # 10 EB, upper limit
)

SIZE_UNITS: tuple[str, ...] = ("MB", "GB", "TB", "PB", "EB")

UNKNOWN_SIZE = "Cannot infer data size"


def format_data_unit(size: int) -> str:
    """
    Format a size reported in kilobytes as a human-readable string.

    Args:
        size: Non-negative size as reported by the host, in KB.

    Returns:
        Number and unit separated by a tab, e.g. ``"2.00\\tMB"``, or
        UNKNOWN_SIZE when the size is at or beyond the 10 EB limit.
    """
    if size < BYTE_THRESHOLDS[0]:
        return f"{size}\tKB"
    for lower, upper, unit in zip(BYTE_THRESHOLDS, BYTE_THRESHOLDS[1:], SIZE_UNITS):
        if lower <= size < upper:
            return f"{size / lower:.2f}\t{unit}"
    return UNKNOWN_SIZE


def format_boot_time(boot_time: BootTime) -> str:
    """Format boot time as seconds with microsecond precision."""
    return f"{boot_time.total_seconds:.6f} seconds"
