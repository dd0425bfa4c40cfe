from emlak_crm.models.base import Base, TimestampMixin
from emlak_crm.models.user import User
from emlak_crm.models.owner import PropertyOwner
from emlak_crm.models.property import Property, PropertyStatus, PropertyType
from emlak_crm.models.tenant import Tenant
from emlak_crm.models.contract import Contract, ContractStatus
from emlak_crm.models.meeting import Meeting

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "PropertyOwner",
    "Property",
    "PropertyStatus",
    "PropertyType",
    "Tenant",
    "Contract",
    "ContractStatus",
    "Meeting",
]
