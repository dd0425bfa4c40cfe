"""
In-memory list filters behind the list endpoints' query parameters.

Each function takes the user's full list (already scoped by the repository)
and returns the matching subset in the original order. A blank search or a
filter value of "all"/None disables that filter; active filters combine as
an intersection.
"""

from enum import Enum
from typing import Any, Iterable, Literal

Assignment = Literal["all", "assigned", "unassigned"]


def _matches(query: str, *values: str | None) -> bool:
    return any(value is not None and query in value.lower() for value in values)


def _is_set(value: Any) -> bool:
    return value is not None and value != "all"


def _value(field: Any) -> Any:
    return field.value if isinstance(field, Enum) else field


def filter_tenants(tenants: Iterable, search: str = "", assignment: Assignment = "all") -> list:
    """
    Filter tenants by search text and assignment status.

    Search is a case-insensitive substring over name, phone, email and the
    assigned property's address. "unassigned" keeps tenants with no linked
    property.
    """
    filtered = list(tenants)

    if search.strip():
        query = search.lower()
        filtered = [
            tenant
            for tenant in filtered
            if _matches(
                query,
                tenant.name,
                tenant.phone,
                tenant.email,
                tenant.property.full_address if tenant.property is not None else None,
            )
        ]

    if assignment == "assigned":
        filtered = [tenant for tenant in filtered if tenant.property is not None]
    elif assignment == "unassigned":
        filtered = [tenant for tenant in filtered if tenant.property is None]

    return filtered


def filter_properties(
    properties: Iterable,
    search: str = "",
    status: str | None = "all",
    city: str | None = "all",
    owner_id: int | None = None,
) -> list:
    """Filter properties by search text (address, city, district, owner name), status, city and owner."""
    filtered = list(properties)

    if search.strip():
        query = search.lower()
        filtered = [
            prop
            for prop in filtered
            if _matches(
                query,
                prop.full_address,
                prop.city,
                prop.district,
                prop.owner.name if prop.owner is not None else None,
            )
        ]

    if _is_set(status):
        filtered = [prop for prop in filtered if _value(prop.status) == _value(status)]
    if _is_set(city):
        filtered = [prop for prop in filtered if prop.city == city]
    if owner_id is not None:
        filtered = [prop for prop in filtered if prop.owner_id == owner_id]

    return filtered


def filter_contracts(contracts: Iterable, search: str = "", status: str | None = "all") -> list:
    """Filter contracts by tenant name / property address and status."""
    filtered = list(contracts)

    if search.strip():
        query = search.lower()
        filtered = [
            contract
            for contract in filtered
            if _matches(
                query,
                contract.tenant.name if contract.tenant is not None else None,
                contract.property.full_address if contract.property is not None else None,
            )
        ]

    if _is_set(status):
        filtered = [contract for contract in filtered if _value(contract.status) == _value(status)]

    return filtered
