"""Component-based address handling used to match properties."""

import re
from dataclasses import dataclass

# Applied in order; "bulvarı" must be replaced before "bulvar"
_ABBREVIATIONS = [
    ("mahallesi", "mah"),
    ("caddesi", "cad"),
    ("sokak", "sok"),
    ("sokağı", "sok"),
    ("bulvarı", "blv"),
    ("bulvar", "blv"),
]
_WHITESPACE = re.compile(r"\s+")


@dataclass
class AddressComponents:
    mahalle: str
    cadde_sokak: str
    bina_no: str
    ilce: str
    il: str
    daire_no: str | None = None


def generate_full_address(components: AddressComponents) -> str:
    """
    Human-readable address.

    Example: "Moda Mahallesi Atatürk Caddesi No:123 D:5, Kadıköy/İstanbul"
    """
    parts = [components.mahalle, components.cadde_sokak, f"No:{components.bina_no}"]
    if components.daire_no:
        parts.append(f"D:{components.daire_no}")
    return f"{' '.join(parts)}, {components.ilce}/{components.il}"


def normalize_address(components: AddressComponents) -> str:
    """
    Matching key for an address.

    Example: "moda mah atatürk cad 123 5 kadıköy istanbul"
    """
    joined = " ".join(
        part
        for part in (
            components.mahalle,
            components.cadde_sokak,
            components.bina_no,
            components.daire_no,
            components.ilce,
            components.il,
        )
        if part
    )
    normalized = _turkish_lower(joined)
    for word, abbreviation in _ABBREVIATIONS:
        normalized = normalized.replace(word, abbreviation)
    return _WHITESPACE.sub(" ", normalized).strip()


def addresses_match(first: AddressComponents, second: AddressComponents) -> bool:
    return normalize_address(first) == normalize_address(second)


def _turkish_lower(text: str) -> str:
    # str.lower() turns "İ" into "i" plus a combining dot
    return text.replace("İ", "i").replace("I", "ı").lower()
