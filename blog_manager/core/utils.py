"""
Utility helpers shared across repositories/services.
"""

from datetime import datetime, timezone
import secrets


def utc_now_iso() -> str:
    """
    Current UTC time as ISO-8601 with milliseconds and a trailing "Z".
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_id(prefix: str = "") -> str:
    return f"{prefix}{secrets.token_hex(6)}"
