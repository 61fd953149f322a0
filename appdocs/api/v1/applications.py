"""Applications API router.

Document download for a single application.
"""

import uuid

import structlog
from fastapi import APIRouter, Response

from appdocs.api.deps import AppSettings, DocumentGeneratorDep
from appdocs.core.errors import InvalidStateError, NotFoundError
from appdocs.core.filenames import document_filename
from appdocs.services.application_document import DocumentOutcome

_PDF_MEDIA_TYPE = "application/pdf"

logger = structlog.get_logger()

router = APIRouter()


@router.get("/{application_id}/document")
def download_application_document(
    application_id: uuid.UUID,
    generator: DocumentGeneratorDep,
    config: AppSettings,
) -> Response:
    """Generate and download the PDF document for an application.

    Runs in the threadpool; generation is blocking.

    Args:
        application_id: The application to generate a document for.
        generator: Document generator (injected).
        config: Settings providing the template base URI (injected).

    Returns:
        PDF response with a Content-Disposition attachment header.

    Raises:
        NotFoundError: If no application has the id.
        InvalidStateError: If the application's state has no document.
    """
    result = generator.generate(application_id, config.template_base_uri)

    if result.outcome is DocumentOutcome.NOT_FOUND:
        raise NotFoundError("Application", str(application_id))

    if result.outcome is DocumentOutcome.UNSUPPORTED_STATE or result.pdf_bytes is None:
        raise InvalidStateError(
            f"No document is available for application '{application_id}' "
            "in its current state."
        )

    filename = document_filename(result.reference_number or str(application_id))
    logger.info(
        "application_document_served",
        application_id=str(application_id),
        size_bytes=len(result.pdf_bytes),
    )
    return Response(
        content=result.pdf_bytes,
        media_type=_PDF_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
