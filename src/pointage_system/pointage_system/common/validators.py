from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} requis")
    return value.strip()


def optional_str(value: Optional[str]) -> Optional[str]:
    """Blank strings become None."""
    if value is None or not value.strip():
        return None
    return value.strip()


def parse_leading_int(value: str) -> Optional[int]:
    """Integer formed by the leading digits of `value` ("12AB" -> 12), or None."""
    m = _LEADING_INT.match(value or "")
    if not m:
        return None
    return int(m.group(1))
