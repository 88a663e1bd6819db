"""Document API: thin routes delegating to the upload, query and command services."""

from datetime import datetime
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, File, Form, Query, Response, UploadFile
from fastapi.responses import StreamingResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.api.v1.dependencies import (
    get_current_actor,
    get_document_command_service,
    get_document_query_service,
    get_document_upload_service,
)
from app.application.dtos.document import DocumentFilter
from app.application.use_cases.documents import (
    DocumentCommandService,
    DocumentQueryService,
    DocumentUploadService,
)
from app.schemas.document import DocumentResponse, DocumentStatusUpdate, DocumentUpdate

router = APIRouter()


def _content_disposition(filename: str) -> str:
    """Attachment header carrying the original name (RFC 5987 form for non-ASCII names)."""
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quoted}"


@router.post("", response_model=DocumentResponse, status_code=201)
async def upload_document(
    actor: Annotated[str, Depends(get_current_actor)],
    upload_svc: Annotated[DocumentUploadService, Depends(get_document_upload_service)],
    file: UploadFile | str | None = File(None),
    title: str | None = Form(None),
    description: str | None = Form(None),
    category: str | None = Form(None),
    department: str | None = Form(None),
    confidentiality: str | None = Form(None),
    tags: str | None = Form(None, description="Comma-delimited tags"),
):
    """Upload a file with its metadata (blob store + document record).

    A "file" part sent without a filename arrives as a plain string and is
    treated as no file at all.
    """
    upload = file if isinstance(file, StarletteUploadFile) else None
    created = await upload_svc.upload_document(
        file_data=upload.file if upload is not None else None,
        original_name=upload.filename if upload is not None else None,
        mime_type=upload.content_type if upload is not None else None,
        actor=actor,
        title=title,
        description=description,
        category=category,
        department=department,
        confidentiality=confidentiality,
        tags=tags,
    )
    return DocumentResponse.model_validate(created)


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    query_svc: Annotated[DocumentQueryService, Depends(get_document_query_service)],
    q: str | None = Query(None, description="Case-insensitive text in title, description or tags"),
    category: str | None = None,
    department: str | None = None,
    status: str | None = None,
    confidentiality: str | None = None,
    date_from: datetime | None = Query(
        None, alias="dateFrom", description="Uploaded at or after (inclusive)"
    ),
    date_to: datetime | None = Query(
        None, alias="dateTo", description="Uploaded at or before (inclusive)"
    ),
):
    """List documents matching all given filters, in upload order."""
    criteria = DocumentFilter(
        q=q,
        category=category,
        department=department,
        status=status,
        confidentiality=confidentiality,
        date_from=date_from,
        date_to=date_to,
    )
    return [DocumentResponse.model_validate(d) for d in query_svc.list_documents(criteria)]


@router.get("/{document_id}/download")
async def download_document(
    document_id: str,
    query_svc: Annotated[DocumentQueryService, Depends(get_document_query_service)],
):
    """Stream the stored file under its original name."""
    document, stream = await query_svc.open_download(document_id)
    return StreamingResponse(
        stream,
        media_type=document.mime_type,
        headers={"Content-Disposition": _content_disposition(document.original_name)},
    )


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    query_svc: Annotated[DocumentQueryService, Depends(get_document_query_service)],
):
    """Get one document by id."""
    return DocumentResponse.model_validate(query_svc.get_document(document_id))


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    body: DocumentUpdate,
    actor: Annotated[str, Depends(get_current_actor)],
    command_svc: Annotated[DocumentCommandService, Depends(get_document_command_service)],
):
    """Update document metadata (new version and history entry)."""
    updated = command_svc.update_document(document_id, body.to_patch(), actor=actor)
    return DocumentResponse.model_validate(updated)


@router.patch("/{document_id}/status", response_model=DocumentResponse)
async def update_document_status(
    document_id: str,
    actor: Annotated[str, Depends(get_current_actor)],
    command_svc: Annotated[DocumentCommandService, Depends(get_document_command_service)],
    body: DocumentStatusUpdate | None = Body(None),
):
    """Approve or reject a document. A missing body is an invalid status."""
    status = body.status if body is not None else None
    updated = command_svc.set_status(document_id, status, actor=actor)
    return DocumentResponse.model_validate(updated)


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: str,
    command_svc: Annotated[DocumentCommandService, Depends(get_document_command_service)],
) -> Response:
    """Delete the document record and its stored file."""
    await command_svc.delete_document(document_id)
    return Response(status_code=204)
