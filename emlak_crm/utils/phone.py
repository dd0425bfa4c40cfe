import re

_NON_DIGITS = re.compile(r"\D")
_MOBILE_PATTERN = re.compile(r"^5\d{9}$")


def normalize_phone(phone: str | None) -> str:
    """
    Reduce a phone number to its bare national form.

    "0539 217 47 82", "+90 539 217 47 82" and "(0539) 217 47 82" all
    become "5392174782".
    """
    if not phone:
        return ""

    cleaned = _NON_DIGITS.sub("", phone)
    if cleaned.startswith("0"):
        cleaned = cleaned[1:]
    if cleaned.startswith("90"):
        cleaned = cleaned[2:]
    return cleaned


def format_phone_for_display(phone: str) -> str:
    """Format as "0539 217 47 82"; returns the input untouched if it is not 10 digits."""
    normalized = normalize_phone(phone)
    if len(normalized) != 10:
        return phone
    return f"0{normalized[:3]} {normalized[3:6]} {normalized[6:8]} {normalized[8:]}"


def is_valid_phone(phone: str) -> bool:
    """Turkish mobile: starts with 5, exactly 10 digits after normalisation"""
    return bool(_MOBILE_PATTERN.match(normalize_phone(phone)))
