"""
Turkish residential rental contract (kira sözleşmesi) as a PDF.

Page layout:
    1    info table, fixtures declaration, CPI note, signatures
    2    general terms
    3-4  special terms (flow onto the next page), signing date, signatures
    5    eviction undertaking

Text is rendered with the TrueType font at PDF_FONT_PATH when configured.
Without one the core Helvetica font is used and the Turkish letters outside
Latin-1 are folded to their base letters.
"""

from dataclasses import dataclass
from datetime import date

from fpdf import FPDF
from fpdf.fonts import FontFace
from fpdf.enums import XPos, YPos

from emlak_crm.config import settings
from emlak_crm.core.crypto import FieldCipher
from emlak_crm.core.exceptions import PdfGenerationException
from emlak_crm.core.logging import get_logger
from emlak_crm.models.contract import Contract
from emlak_crm.models.property import PropertyType
from emlak_crm.templates.contract_content import (
    CPI_INCREASE_NOTE,
    EVICTION_UNDERTAKING_TEXT,
    GENERAL_TERMS,
    PAYMENT_CLAUSE_INDEX,
    PAYMENT_CLAUSE_SUFFIX,
    SPECIAL_TERMS,
)
from emlak_crm.utils.formatting import format_short_date, format_turkish_long_date, format_turkish_number
from emlak_crm.utils.number_to_text import number_to_turkish_text
from emlak_crm.utils.phone import format_phone_for_display

logger = get_logger(__name__)

MARGIN = 15  # mm
FONT_SIZE_TITLE = 14
FONT_SIZE_SUBTITLE = 12
FONT_SIZE_BODY = 10
FONT_SIZE_SMALL = 9

DEFAULT_FIXTURES = "Kombi, Klima"
DEFAULT_USAGE = "Mesken"

PROPERTY_TYPE_LABELS = {
    PropertyType.APARTMENT: "Daire",
    PropertyType.HOUSE: "Müstakil Ev",
    PropertyType.COMMERCIAL: "İşyeri",
}

# Core PDF fonts only cover Latin-1
_LATIN1_FOLD = str.maketrans({"ı": "i", "İ": "I", "ğ": "g", "Ğ": "G", "ş": "s", "Ş": "S"})


@dataclass
class ContractPdfData:
    """Everything printed on the contract, already formatted for display"""

    contract_number: str
    contract_date: str  # "01/01/2025"

    # Property
    mahalle: str
    ilce: str
    il: str
    sokak: str
    bina_no: str
    daire_no: str
    property_type: str  # "Daire", "İşyeri", ...
    property_usage: str  # "Mesken", ...

    # Owner (kiraya veren)
    owner_name: str
    owner_iban: str

    # Tenant (kiracı)
    tenant_name: str
    tenant_address: str
    tenant_phone: str

    # Rent
    monthly_rent: float
    monthly_rent_text: str
    yearly_rent: float
    yearly_rent_text: str
    deposit_amount: float
    deposit_text: str

    # Dates ("01 Ocak 2025")
    start_date: str
    end_date: str
    payment_day: str

    fixtures: str
    eviction_date: str
    commitment_date: str

    owner_tc: str | None = None
    owner_phone: str | None = None
    tenant_tc: str | None = None


def contract_pdf_filename(contract_number: str) -> str:
    return f"Kira_Sozlesmesi_{contract_number}.pdf"


def build_contract_pdf_data(
    contract: Contract, cipher: FieldCipher, today: date | None = None
) -> ContractPdfData:
    """
    Prepare a stored contract (with tenant, property and owner loaded) for rendering.

    TC and IBAN values are decrypted here; amounts are spelled out in Turkish.
    """
    today = today or date.today()
    prop = contract.property
    owner = contract.owner
    tenant = contract.tenant

    monthly_rent = contract.rent_amount
    yearly_rent = monthly_rent * 12
    deposit = contract.deposit or 0

    return ContractPdfData(
        contract_number=f"{contract.id:08d}",
        contract_date=format_short_date(today),
        mahalle=prop.mahalle,
        ilce=prop.district,
        il=prop.city,
        sokak=prop.cadde_sokak,
        bina_no=prop.bina_no,
        daire_no=prop.daire_no or "",
        property_type=PROPERTY_TYPE_LABELS.get(prop.property_type, "Daire"),
        property_usage=prop.use_purpose or DEFAULT_USAGE,
        owner_name=owner.name,
        owner_tc=cipher.decrypt(owner.tc_encrypted) if owner.tc_encrypted else None,
        owner_phone=format_phone_for_display(owner.phone) if owner.phone else None,
        owner_iban=cipher.decrypt(owner.iban_encrypted) if owner.iban_encrypted else "",
        tenant_name=tenant.name,
        tenant_tc=cipher.decrypt(tenant.tc_encrypted) if tenant.tc_encrypted else None,
        tenant_address=tenant.address or "",
        tenant_phone=format_phone_for_display(tenant.phone) if tenant.phone else "",
        monthly_rent=monthly_rent,
        monthly_rent_text=number_to_turkish_text(monthly_rent),
        yearly_rent=yearly_rent,
        yearly_rent_text=number_to_turkish_text(yearly_rent),
        deposit_amount=deposit,
        deposit_text=number_to_turkish_text(deposit),
        start_date=format_turkish_long_date(contract.start_date),
        end_date=format_turkish_long_date(contract.end_date),
        payment_day=str(contract.payment_day_of_month or 1),
        fixtures=contract.special_conditions or DEFAULT_FIXTURES,
        eviction_date=format_turkish_long_date(contract.end_date),
        commitment_date=format_turkish_long_date(today),
    )


def generate_contract_pdf(
    data: ContractPdfData, min_size: int | None = None, max_size: int | None = None
) -> bytes:
    """
    Render the five-page contract.

    Args:
        data: Display values for the contract
        min_size: Smallest plausible output in bytes (default PDF_MIN_SIZE_BYTES)
        max_size: Largest accepted output in bytes (default PDF_MAX_SIZE_BYTES)

    Raises:
        PdfGenerationException: If the output size is outside [min_size, max_size]
    """
    min_size = settings.PDF_MIN_SIZE_BYTES if min_size is None else min_size
    max_size = settings.PDF_MAX_SIZE_BYTES if max_size is None else max_size

    document = _ContractDocument()
    document.render_info_page(data)
    document.render_general_terms()
    document.render_special_terms(data)
    document.render_eviction_undertaking(data)
    pdf = document.output()

    if len(pdf) < min_size:
        logger.error("contract_pdf_too_small", contract_number=data.contract_number, size=len(pdf))
        raise PdfGenerationException(f"PDF generation failed - output too small ({len(pdf)} bytes)")
    if len(pdf) > max_size:
        logger.error("contract_pdf_too_large", contract_number=data.contract_number, size=len(pdf))
        raise PdfGenerationException(f"PDF too large ({len(pdf) / 1024 / 1024:.2f} MB)")

    logger.info("contract_pdf_generated", contract_number=data.contract_number, size=len(pdf))
    return pdf


def _with_tc(name: str, tc: str | None) -> str:
    return f"{name} - T.C.: {tc}" if tc else name


def _money(amount: float, words: str) -> str:
    return f"{format_turkish_number(amount)} TL ({words} TÜRK LİRASI)"


class _ContractDocument:
    """Thin layer over FPDF that knows the contract's fonts and layout"""

    def __init__(self):
        self.pdf = FPDF(orientation="portrait", unit="mm", format="A4")
        self.pdf.set_margins(MARGIN, MARGIN, MARGIN)
        self.pdf.set_auto_page_break(auto=True, margin=MARGIN)
        self.pdf.set_compression(settings.PDF_COMPRESS)
        self.pdf.set_title("Kira Sözleşmesi")
        self.family, self.unicode = self._load_fonts()

    def _load_fonts(self) -> tuple[str, bool]:
        if not settings.PDF_FONT_PATH:
            return "Helvetica", False

        self.pdf.add_font("ContractFont", "", settings.PDF_FONT_PATH)
        self.pdf.add_font("ContractFont", "B", settings.PDF_FONT_BOLD_PATH or settings.PDF_FONT_PATH)
        return "ContractFont", True

    def text(self, value: str) -> str:
        if self.unicode:
            return value
        folded = value.translate(_LATIN1_FOLD)
        return folded.encode("latin-1", "replace").decode("latin-1")

    def font(self, size: float, bold: bool = False) -> None:
        self.pdf.set_font(self.family, "B" if bold else "", size)

    def title(self, value: str, size: float) -> None:
        self.font(size, bold=True)
        self.pdf.cell(0, 8, self.text(value), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def paragraph(self, value: str, size: float = FONT_SIZE_BODY, bold: bool = False, line_height: float = 5) -> None:
        self.font(size, bold)
        self.pdf.multi_cell(0, line_height, self.text(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def info_table(self, rows: list[tuple[str, str]], col_widths: tuple[int, int]) -> None:
        self.font(FONT_SIZE_BODY)
        label_style = FontFace(emphasis="BOLD")
        with self.pdf.table(
            width=self.pdf.epw,
            col_widths=col_widths,
            first_row_as_headings=False,
            line_height=6,
        ) as table:
            for label, value in rows:
                row = table.row()
                row.cell(self.text(label), style=label_style)
                row.cell(self.text(value))

    def signature_area(self) -> None:
        # Keep the block on one page
        if self.pdf.get_y() + 30 > self.pdf.h - MARGIN:
            self.pdf.add_page()

        y = self.pdf.get_y()
        right_x = self.pdf.w - MARGIN - 60
        self.font(11, bold=True)
        self.pdf.set_xy(MARGIN, y)
        self.pdf.cell(60, 6, self.text("KİRACI"), align="C")
        self.pdf.set_xy(right_x, y)
        self.pdf.cell(60, 6, self.text("KİRAYA VEREN"), align="C")
        self.pdf.line(MARGIN, y + 20, MARGIN + 60, y + 20)
        self.pdf.line(right_x, y + 20, right_x + 60, y + 20)
        self.pdf.set_xy(MARGIN, y + 25)

    def render_info_page(self, data: ContractPdfData) -> None:
        self.pdf.add_page()
        self.title("KİRA SÖZLEŞMESİ", FONT_SIZE_TITLE)
        self.pdf.ln(7)

        self.info_table(
            [
                ("NUMARASI", data.contract_number),
                ("MAHALLESİ/İLÇE/İL", f"{data.mahalle} / {data.ilce} / {data.il}"),
                ("SOKAĞI/NUMARASI", f"{data.sokak} No: {data.bina_no} Daire: {data.daire_no}"),
                ("KİRALANAN ŞEYİN CİNSİ", data.property_type),
                ("KİRAYA VERENİN ADI SOYADI", _with_tc(data.owner_name, data.owner_tc)),
                ("KİRACININ ADI SOYADI", _with_tc(data.tenant_name, data.tenant_tc)),
                ("KİRACININ İKAMETGAHI", data.tenant_address),
                ("KİRACININ TELEFONU", data.tenant_phone),
                ("BİR AYLIK KİRA KARŞILIĞI", _money(data.monthly_rent, data.monthly_rent_text)),
                ("BİR SENELİK KİRA KARŞILIĞI", _money(data.yearly_rent, data.yearly_rent_text)),
                ("KİRANIN NE ŞEKİLDE ÖDENECEĞİ", f"IBAN: {data.owner_iban}"),
                ("KİRA MÜDDETİ", "1 YIL"),
                ("KİRANIN BAŞLANGICI", data.start_date),
                ("DEPOZİTO", _money(data.deposit_amount, data.deposit_text)),
                ("KİRALANAN MECURUN NE İÇİN KULLANILACAĞI", data.property_usage),
            ],
            col_widths=(60, 120),
        )

        self.pdf.ln(10)
        self.paragraph("KİRALANAN ŞEY İLE BERABER TESLİM ALINAN DEMİRBAŞ BEYANI", bold=True)
        self.pdf.ln(2)
        self.paragraph(data.fixtures)
        self.pdf.ln(10)
        self.paragraph(CPI_INCREASE_NOTE, bold=True)
        self.pdf.ln(15)
        self.signature_area()

    def render_general_terms(self) -> None:
        self.pdf.add_page()
        self.title("GENEL ŞARTLAR", FONT_SIZE_SUBTITLE)
        self.pdf.ln(4)

        for number, clause in enumerate(GENERAL_TERMS, start=1):
            self.paragraph(f"{number}. {clause}", size=FONT_SIZE_SMALL, line_height=4)
            self.pdf.ln(3)

    def render_special_terms(self, data: ContractPdfData) -> None:
        self.pdf.add_page()
        self.title("ÖZEL ŞARTLAR", FONT_SIZE_SUBTITLE)
        self.pdf.ln(4)

        for index, clause in enumerate(SPECIAL_TERMS):
            if index == PAYMENT_CLAUSE_INDEX:
                clause += PAYMENT_CLAUSE_SUFFIX.format(
                    payment_day=data.payment_day,
                    iban=data.owner_iban,
                    owner_name=data.owner_name,
                )
            self.paragraph(f"{index + 1}- {clause}", size=FONT_SIZE_SMALL, line_height=4)
            self.pdf.ln(3)

        self.pdf.ln(5)
        self.paragraph(f"İmza Tarihi: {data.contract_date}", bold=True)
        self.pdf.ln(10)
        self.signature_area()

    def render_eviction_undertaking(self, data: ContractPdfData) -> None:
        self.pdf.add_page()
        self.title("TAHLİYE TAAHHÜTNAMESİ", FONT_SIZE_TITLE)
        self.pdf.ln(12)

        self.info_table(
            [
                ("Taahhüt Edenin Adı Soyadı", _with_tc(data.tenant_name, data.tenant_tc)),
                ("Mal Sahibinin Adı Soyadı", _with_tc(data.owner_name, data.owner_tc)),
                (
                    "Tahliye Edilecek Kiralananın Adresi",
                    f"{data.mahalle} {data.sokak} No:{data.bina_no} D:{data.daire_no} {data.ilce}/{data.il}",
                ),
                ("Tahliye Tarihi", data.eviction_date),
            ],
            col_widths=(80, 100),
        )

        self.pdf.ln(15)
        self.paragraph(EVICTION_UNDERTAKING_TEXT)
        self.pdf.ln(20)
        self.paragraph(f"Taahhüt Tarihi: {data.commitment_date}", bold=True)
        self.pdf.ln(5)
        self.paragraph(f"Taahhüt Eden: {data.tenant_name}", bold=True)
        self.pdf.ln(15)
        self.paragraph("İMZA:", bold=True)

    def output(self) -> bytes:
        return bytes(self.pdf.output())
