"""Human-readable byte sizes."""

_UNITS = ["Bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]


def format_size(size: int) -> str:
    """Format ``size`` bytes with base-1024 units and one decimal place."""
    size_f = float(size)
    for unit in _UNITS[:-1]:
        # compare the rounded value so the unit matches the printed digits
        if round(size_f, 1) < 1024:
            return f"{size_f:.1f} {unit}"
        size_f /= 1024
    return f"{size_f:.1f} {_UNITS[-1]}"
