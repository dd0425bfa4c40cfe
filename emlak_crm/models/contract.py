from datetime import date
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Date, Text, Enum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from emlak_crm.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from emlak_crm.models.user import User
    from emlak_crm.models.tenant import Tenant
    from emlak_crm.models.property import Property
    from emlak_crm.models.owner import PropertyOwner


class ContractStatus(str, PyEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ARCHIVED = "Archived"


class Contract(Base, TimestampMixin):
    """
    Rental agreement between an owner and a tenant for one property.

    special_conditions holds the fixtures declaration printed on the
    first page of the contract PDF.
    """

    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("property_owners.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    rent_amount: Mapped[float] = mapped_column(Numeric(precision=15, scale=2), nullable=False)
    deposit: Mapped[float] = mapped_column(Numeric(precision=15, scale=2), nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="TRY")
    status: Mapped[ContractStatus] = mapped_column(
        Enum(ContractStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ContractStatus.ACTIVE,
    )
    payment_day_of_month: Mapped[int | None] = mapped_column(Integer, nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(100), nullable=True)
    special_conditions: Mapped[str | None] = mapped_column(Text, nullable=True)
    contract_pdf_path: Mapped[str | None] = mapped_column(String(512), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="contracts")
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="contracts")
    property: Mapped["Property"] = relationship("Property", back_populates="contracts")
    owner: Mapped["PropertyOwner"] = relationship("PropertyOwner")

    __table_args__ = (
        Index("ix_contracts_tenant_status", "tenant_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<Contract(id={self.id}, tenant_id={self.tenant_id}, property_id={self.property_id}, status={self.status.value})>"
