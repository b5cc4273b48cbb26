from typing import Any, Optional


def normalize_key(name: Any) -> str:
    """Lookup key for names matched case-insensitively (pantry, prices)."""
    return clean_text(name).lower()


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    '''Trimmed text, or None when nothing is left.'''
    cleaned = clean_text(value)
    return cleaned or None


def as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
