from datetime import datetime
from sqlalchemy import String, Integer, ForeignKey, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from emlak_crm.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from emlak_crm.models.user import User
    from emlak_crm.models.tenant import Tenant
    from emlak_crm.models.property import Property
    from emlak_crm.models.owner import PropertyOwner


class Meeting(Base, TimestampMixin):
    """
    Calendar entry, optionally about one tenant, property or owner.

    reminder_minutes overrides the default notification lead time.
    """

    __tablename__ = "meetings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    reminder_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)

    tenant_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("tenants.id", ondelete="SET NULL"), nullable=True
    )
    property_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("properties.id", ondelete="SET NULL"), nullable=True
    )
    owner_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("property_owners.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="meetings")
    tenant: Mapped["Tenant | None"] = relationship("Tenant")
    property: Mapped["Property | None"] = relationship("Property")
    owner: Mapped["PropertyOwner | None"] = relationship("PropertyOwner")
