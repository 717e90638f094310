"""Display helpers shared by CLI commands."""
from datetime import datetime, timezone

_BYTE_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(num_bytes: int) -> str:
    """1536 -> '1.5 KB'. Caps at GB."""
    if num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(_BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {_BYTE_UNITS[unit]}"


def format_timestamp(ts_us: int) -> str:
    """HH:MM:SS.mmm in UTC."""
    return datetime.fromtimestamp(ts_us / 1_000_000, tz=timezone.utc).strftime("%H:%M:%S.%f")[:-3]
