from fastapi import APIRouter, Depends, File, UploadFile

from emlak_crm.core.exceptions import ValidationException
from emlak_crm.dependencies import get_current_user
from emlak_crm.models.user import User
from emlak_crm.services.text_extraction_service import (
    TextExtractionClient,
    get_text_extraction_client,
    validate_upload,
)

router = APIRouter()


@router.post("/")
async def extract_text(
    file: UploadFile | None = File(None),
    user: User = Depends(get_current_user),
    client: TextExtractionClient = Depends(get_text_extraction_client),
):
    """
    Extract text from a PDF or EPUB upload.

    The file is forwarded to the extraction API and its JSON answer is
    returned unchanged.
    """
    if file is None:
        raise ValidationException("No file uploaded", code="ERROR_VALIDATION_NO_FILE")

    content = await file.read()
    validate_upload(file.filename, file.content_type, len(content))
    return await client.extract(file.filename or "upload", content, file.content_type)
