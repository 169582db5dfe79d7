"""Human-readable byte size formatting."""

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_size(num_bytes: int) -> str:
    """Convert a byte count into a human-readable string.

    Uses base-1024 magnitudes and two-decimal precision. Trailing zeros of the
    rounded value are dropped, so whole values carry no decimal part. Sizes past
    the yottabyte range stay expressed in YB.

    Args:
        num_bytes: Non-negative number of bytes.

    Returns:
        The formatted size, e.g. ``"1.5 KB"``.

    Raises:
        ValueError: If num_bytes is negative.

    Example:
        >>> format_size(0)
        '0 B'
        >>> format_size(1024)
        '1 KB'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(1048576)
        '1 MB'
    """
    if num_bytes < 0:
        raise ValueError(f"Size cannot be negative: {num_bytes}")
    if num_bytes == 0:
        return "0 B"

    # floor(log1024(num_bytes)), on integers
    index = 0
    while index < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (index + 1):
        index += 1

    value = f"{num_bytes / 1024 ** index:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[index]}"
