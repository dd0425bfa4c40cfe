from sqlalchemy import String, Integer, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from emlak_crm.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from emlak_crm.models.user import User
    from emlak_crm.models.property import Property


class PropertyOwner(Base, TimestampMixin):
    """
    Landlord (kiraya veren).

    TC and IBAN are stored encrypted; tc_hash allows lookups and
    duplicate detection without decrypting.
    """

    __tablename__ = "property_owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    tc_encrypted: Mapped[str | None] = mapped_column(Text, nullable=True)
    tc_hash: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    iban_encrypted: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="owners")
    properties: Mapped[list["Property"]] = relationship("Property", back_populates="owner")

    def __repr__(self) -> str:
        return f"<PropertyOwner(id={self.id}, name='{self.name}')>"
