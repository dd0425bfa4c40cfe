"""Application error kinds and their i18n keys."""

import re


class EmlakCrmException(Exception):
    """Base exception for the property management API"""

    default_code = "ERROR_GENERAL_SERVER_ERROR"

    def __init__(self, message: str = "", code: str | None = None):
        super().__init__(message)
        self.code = code or self.default_code

    @property
    def key(self) -> str:
        return error_key(self.code)


class UnauthorizedException(EmlakCrmException):
    """Raised when JWT validation fails"""

    default_code = "ERROR_AUTH_UNAUTHORIZED"


class NotFoundException(EmlakCrmException):
    """Raised when resource not found (or owned by another user)"""

    default_code = "ERROR_GENERAL_NOT_FOUND"


class ForbiddenException(EmlakCrmException):
    """Raised when user tries to access another user's data"""

    default_code = "ERROR_GENERAL_FORBIDDEN"


class ValidationException(EmlakCrmException):
    """Raised for business logic validation errors"""

    default_code = "ERROR_VALIDATION_FAILED"


class ServerErrorException(EmlakCrmException):
    """Raised when the database layer fails; wraps the original error as __cause__"""

    default_code = "ERROR_GENERAL_SERVER_ERROR"


class PdfGenerationException(EmlakCrmException):
    """Raised when a generated contract PDF fails its size sanity check"""

    default_code = "ERROR_CONTRACT_PDF_GENERATION_FAILED"


class UpstreamServiceException(EmlakCrmException):
    """Raised when a third-party API answers with an error status"""

    default_code = "ERROR_GENERAL_UPSTREAM_FAILED"

    def __init__(self, message: str, status_code: int, code: str | None = None):
        super().__init__(message, code)
        self.status_code = status_code


_CATEGORY_NAMESPACES = {
    "PHOTO": "photo",
    "TENANT": "tenant",
    "PROPERTY": "property",
    "OWNER": "owner",
    "CONTRACT": "contract",
    "MEETING": "meeting",
    "AUTH": "auth",
    "VALIDATION": "validation",
    "GENERAL": "general",
}


def error_key(code: str) -> str:
    """
    Map an error code to its translation key.

    ERROR_CONTRACT_NOT_FOUND -> errors.contract.notFound
    ERROR_GENERAL_NOT_FOUND  -> errors.general.notFound
    """
    parts = re.sub(r"^ERROR_", "", code).split("_")
    namespace = _CATEGORY_NAMESPACES.get(parts[0], "general")
    rest = parts[1:]

    if not rest:
        return f"errors.{namespace}.unknown"

    name = rest[0].lower() + "".join(part.capitalize() for part in rest[1:])
    return f"errors.{namespace}.{name}"
