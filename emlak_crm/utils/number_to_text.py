"""Turkish number-to-words conversion for amounts printed on contracts."""

ONES = ["", "BİR", "İKİ", "ÜÇ", "DÖRT", "BEŞ", "ALTI", "YEDİ", "SEKİZ", "DOKUZ"]
TENS = ["", "ON", "YİRMİ", "OTUZ", "KIRK", "ELLİ", "ALTMIŞ", "YETMİŞ", "SEKSEN", "DOKSAN"]


def number_to_turkish_text(num: int | float) -> str:
    """
    Spell out a non-negative amount in upper-case Turkish, words joined without spaces.

    The fractional part is truncated. "BİR" is dropped before YÜZ and BİN
    but kept before MİLYON, as in written Turkish amounts.

    Examples:
        15000   -> "ONBEŞBİN"
        100000  -> "YÜZBİN"
        1234567 -> "BİRMİLYONİKİYÜZOTUZDÖRTBİNBEŞYÜZALTMIŞYEDİ"

    Raises:
        ValueError: If num is negative
    """
    if num < 0:
        raise ValueError(f"Cannot convert negative number to text: {num}")

    value = int(num)
    if value == 0:
        return "SIFIR"

    result = ""

    # Millions
    if value >= 1_000_000:
        millions = value // 1_000_000
        result += ("BİR" if millions == 1 else number_to_turkish_text(millions)) + "MİLYON"

    # Thousands
    below_million = value % 1_000_000
    if below_million >= 1000:
        thousands = below_million // 1000
        result += "BİN" if thousands == 1 else number_to_turkish_text(thousands) + "BİN"

    # Hundreds
    below_thousand = below_million % 1000
    if below_thousand >= 100:
        hundreds = below_thousand // 100
        result += "YÜZ" if hundreds == 1 else ONES[hundreds] + "YÜZ"

    below_hundred = below_thousand % 100
    if below_hundred >= 10:
        result += TENS[below_hundred // 10]
    if below_hundred % 10:
        result += ONES[below_hundred % 10]

    return result or "SIFIR"
