"""
Proxy to the third-party text-extraction API.

Uploads are validated here, then forwarded as multipart with the service
credentials from settings so they never reach the browser.
"""

from collections.abc import AsyncIterator
from pathlib import PurePath
from typing import Any

import httpx

from emlak_crm.config import settings
from emlak_crm.core.exceptions import UpstreamServiceException, ValidationException
from emlak_crm.core.logging import get_logger

logger = get_logger(__name__)

ALLOWED_CONTENT_TYPES = {"application/pdf", "application/epub+zip", "application/octet-stream"}
ALLOWED_EXTENSIONS = {".pdf", ".epub"}


def validate_upload(filename: str | None, content_type: str | None, size: int, max_size: int | None = None) -> None:
    """
    Check an upload before forwarding it.

    Raises:
        ValidationException: Unsupported type (neither content type nor extension allowed) or too large
    """
    max_size = settings.TEXT_EXTRACTION_MAX_FILE_SIZE if max_size is None else max_size
    extension = PurePath(filename or "").suffix.lower()

    if content_type not in ALLOWED_CONTENT_TYPES and extension not in ALLOWED_EXTENSIONS:
        raise ValidationException(
            "Unsupported file type. Please upload a PDF or EPUB file.",
            code="ERROR_VALIDATION_UNSUPPORTED_FILE_TYPE",
        )
    if size > max_size:
        raise ValidationException(
            f"File size too large. Maximum {max_size // (1024 * 1024)} MB.",
            code="ERROR_VALIDATION_FILE_TOO_LARGE",
        )


class TextExtractionClient:
    """Forwards files to TEXT_EXTRACTION_API_URL and passes the JSON result through"""

    def __init__(
        self,
        http: httpx.AsyncClient,
        url: str | None = None,
        id_token: str | None = None,
        app_check_token: str | None = None,
    ):
        self.http = http
        self.url = url or settings.TEXT_EXTRACTION_API_URL
        self.id_token = settings.TEXT_EXTRACTION_ID_TOKEN if id_token is None else id_token
        self.app_check_token = settings.TEXT_EXTRACTION_APP_CHECK_TOKEN if app_check_token is None else app_check_token

    async def extract(self, filename: str, content: bytes, content_type: str | None) -> dict[str, Any]:
        """
        Send one file to the extraction API.

        Returns:
            Upstream JSON (extracted text plus metadata)

        Raises:
            UpstreamServiceException: Upstream answered non-2xx (same status) or the call failed (500)
        """
        headers = {
            "Authorization": f"Bearer {self.id_token}",
            "X-Firebase-AppCheck": self.app_check_token,
        }
        files = {"file": (filename, content, content_type or "application/octet-stream")}

        try:
            response = await self.http.post(self.url, headers=headers, files=files)
        except httpx.HTTPError as e:
            logger.error("text_extraction_request_failed", filename=filename, error=str(e))
            raise UpstreamServiceException(str(e) or "Internal server error", status_code=500) from e

        logger.info("text_extraction_upstream_response", filename=filename, status=response.status_code)

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = {}
            error = payload.get("error") if isinstance(payload, dict) else None
            raise UpstreamServiceException(
                error or f"Text extraction API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamServiceException("Text extraction API returned invalid JSON", status_code=500) from e


async def get_text_extraction_client() -> AsyncIterator[TextExtractionClient]:
    """FastAPI dependency: one HTTP client per request"""
    async with httpx.AsyncClient(timeout=settings.TEXT_EXTRACTION_TIMEOUT) as http:
        yield TextExtractionClient(http)
