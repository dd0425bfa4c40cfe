"""Turkish date and money formatting for contract documents."""

from datetime import date
from decimal import Decimal

TURKISH_MONTHS = [
    "Ocak",
    "Şubat",
    "Mart",
    "Nisan",
    "Mayıs",
    "Haziran",
    "Temmuz",
    "Ağustos",
    "Eylül",
    "Ekim",
    "Kasım",
    "Aralık",
]


def format_turkish_long_date(value: date) -> str:
    """01 Ocak 2025"""
    return f"{value.day:02d} {TURKISH_MONTHS[value.month - 1]} {value.year}"


def format_short_date(value: date) -> str:
    """01/01/2025"""
    return value.strftime("%d/%m/%Y")


def format_turkish_number(amount: int | float | Decimal) -> str:
    """
    Format an amount the way tr-TR locale does: dot thousands separator,
    comma decimal separator, at most two decimals and no trailing zeros.

    15000 -> "15.000", 1234.5 -> "1.234,5"
    """
    quantized = Decimal(str(amount)).quantize(Decimal("0.01"))
    integer_part, _, fraction = f"{quantized:,.2f}".partition(".")
    integer_part = integer_part.replace(",", ".")
    fraction = fraction.rstrip("0")
    return f"{integer_part},{fraction}" if fraction else integer_part
