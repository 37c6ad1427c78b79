"""
Label helpers for participant names and address strings.
"""

import re
from typing import Tuple

_ADDRESS_RE = re.compile(r"^\s*(?P<name>.*?)\s*<(?P<email>[^>]+)>\s*$")


def parse_address(value: str) -> Tuple[str, str]:
    """
    Split an address string into (email, name).

    Handles both "Name <email>" and bare "email" forms. The name is empty
    when the string carries none.
    """
    value = (value or "").strip()
    match = _ADDRESS_RE.match(value)
    if match:
        name = match.group("name").strip().strip('"').strip()
        return match.group("email").strip().lower(), name
    if "@" in value:
        return value.lower(), ""
    return value, value


def first_name(name: str) -> str:
    """Return the first word of a name, or the local part of an email."""
    s = (name or "").strip()
    if "@" in s:
        return s.split("@")[0]
    parts = s.split()
    return parts[0] if parts else ""


def initials(name: str) -> str:
    """
    Get up to two initials from a name or email.

    "Ann Lee" -> "AL", "bob@x.com" -> "B", "Cid" -> "CI", "" -> "".
    """
    s = (name or "").strip()
    if not s:
        return ""
    if "@" in s:
        return s.split("@")[0][:1].upper()
    parts = s.split()
    if len(parts) >= 2:
        return (parts[0][0] + parts[-1][0]).upper()
    return s[:2].upper()


def first_initial(name: str) -> str:
    """The single uppercase glyph drawn in an avatar cell."""
    return initials(name)[:1]
