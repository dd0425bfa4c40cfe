"""Tenant (kiracı) model."""

from sqlalchemy import String, Integer, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from emlak_crm.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from emlak_crm.models.user import User
    from emlak_crm.models.property import Property
    from emlak_crm.models.contract import Contract


class Tenant(Base, TimestampMixin):
    """
    Person renting a property.

    property_id points at the property the tenant currently occupies;
    NULL means the tenant is unassigned.
    """

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    property_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    tc_encrypted: Mapped[str | None] = mapped_column(Text, nullable=True)
    tc_hash: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="tenants")
    property: Mapped["Property | None"] = relationship("Property", back_populates="tenants")
    contracts: Mapped[list["Contract"]] = relationship(
        "Contract", back_populates="tenant", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name='{self.name}')>"
