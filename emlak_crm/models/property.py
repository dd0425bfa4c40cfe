from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Enum, Text, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from emlak_crm.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from emlak_crm.models.user import User
    from emlak_crm.models.owner import PropertyOwner
    from emlak_crm.models.tenant import Tenant
    from emlak_crm.models.contract import Contract


class PropertyStatus(str, PyEnum):
    """Occupancy status"""

    EMPTY = "Empty"
    OCCUPIED = "Occupied"
    INACTIVE = "Inactive"


class PropertyType(str, PyEnum):
    APARTMENT = "apartment"
    HOUSE = "house"
    COMMERCIAL = "commercial"


class Property(Base, TimestampMixin):
    """
    Rental unit belonging to one owner.

    full_address is for display; normalized_address is the matching key
    used to find an existing property when a contract is entered.
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("property_owners.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Address components
    mahalle: Mapped[str] = mapped_column(String(255), nullable=False)
    cadde_sokak: Mapped[str] = mapped_column(String(255), nullable=False)
    bina_no: Mapped[str] = mapped_column(String(32), nullable=False)
    daire_no: Mapped[str | None] = mapped_column(String(32), nullable=True)
    district: Mapped[str] = mapped_column(String(100), nullable=False)  # ilçe
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)  # il
    full_address: Mapped[str] = mapped_column(String(512), nullable=False)
    normalized_address: Mapped[str] = mapped_column(String(512), nullable=False)

    property_type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=PropertyType.APARTMENT,
    )
    use_purpose: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[PropertyStatus] = mapped_column(
        Enum(PropertyStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=PropertyStatus.EMPTY,
    )
    rent_amount: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="TRY")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="properties")
    owner: Mapped["PropertyOwner"] = relationship("PropertyOwner", back_populates="properties")
    tenants: Mapped[list["Tenant"]] = relationship("Tenant", back_populates="property")
    contracts: Mapped[list["Contract"]] = relationship(
        "Contract", back_populates="property", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_properties_user_normalized_address", "user_id", "normalized_address"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, address='{self.full_address}', status={self.status.value})>"
