"""FastAPI application for the contract wizard.

Exposes the templating and validation engine and a local draft store over
HTTP.

Usage (from project root, after installing the package with uvicorn):

    uvicorn contract_wizard.api.app:app --reload
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse, JSONResponse

from ..analyzers.checklist import (
    checklist_status,
    legal_terms_in_content,
    spelling_warnings,
    unfilled_placeholders,
    validation_score,
)
from ..analyzers.section_detector import SectionDetector
from ..checker.contract_checker import ContractChecker
from ..clients.exceptions import CollaboratorError
from ..config.config_manager import LIBRARY_PATH_ENV, ConfigurationManager
from ..extractors.placeholder_extractor import extract_fields
from ..generators.field_merger import apply_field_values, render_preview
from ..generators.payment_section import generate_from_config, insert_payment_section
from ..generators.section_reorderer import auto_reorder, move_section
from ..io.exceptions import ContractIOError, DocumentCorruptedError, UnsupportedFormatError
from ..io.exporter import export_docx, export_filename, export_text
from ..io.importer import import_contract
from ..models.compensation import CompensationConfig
from ..models.fields import ContractField
from ..models.sections import CheckIssue
from ..storage.database import DatabaseManager
from ..storage.repository import DraftRepository
from .schemas import (
    ApplyFieldsRequest,
    ContentRequest,
    ExportRequest,
    FieldPayload,
    FixRequest,
    MoveSectionRequest,
    PaymentSectionRequest,
    ReorderRequest,
    ScoreRequest,
)


logger = logging.getLogger(__name__)

EXPORT_MEDIA_TYPES = {
    "txt": "text/plain",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def _to_fields(payloads: List[FieldPayload]) -> List[ContractField]:
    return [ContractField.from_dict(p.model_dump()) for p in payloads]


def _save_upload_to_temp(upload: UploadFile, temp_dir: Path) -> Path:
    """Save an uploaded file to a temporary directory and return its path."""
    suffix = Path(upload.filename or "").suffix or ""
    temp_file = tempfile.NamedTemporaryFile(delete=False, suffix=suffix, dir=temp_dir)
    try:
        temp_file.write(upload.file.read())
    finally:
        temp_file.close()
    return Path(temp_file.name)


def create_app(
    library_path: Optional[str] = None,
    db_manager: Optional[DatabaseManager] = None,
) -> FastAPI:
    """
    Build the API.

    Args:
        library_path: Content library JSON file. Defaults to
            CONTRACT_WIZARD_LIBRARY_PATH, then to the built-in library.
        db_manager: Database for drafts. Defaults to
            CONTRACT_WIZARD_DATABASE_URL, then to a local SQLite file.
    """
    config_manager = ConfigurationManager()
    library_path = library_path or os.getenv(LIBRARY_PATH_ENV)
    if library_path:
        config_manager.load_library(library_path)
    else:
        config_manager.load_defaults()
    library = config_manager.library

    detector = SectionDetector(library)
    checker = ContractChecker(misspellings=library.misspellings)
    db = db_manager or DatabaseManager()
    drafts = DraftRepository(db)
    schema_ready = {"done": False}

    def _repository() -> DraftRepository:
        if not schema_ready["done"]:
            db.init_database()
            schema_ready["done"] = True
        return drafts

    app = FastAPI(title="Contract Wizard API", version="0.1.0")

    @app.exception_handler(CollaboratorError)
    async def collaborator_error_handler(request: Request, exc: CollaboratorError) -> JSONResponse:
        return JSONResponse(status_code=502, content=exc.to_dict())

    @app.exception_handler(ContractIOError)
    async def io_error_handler(request: Request, exc: ContractIOError) -> JSONResponse:
        if isinstance(exc, UnsupportedFormatError):
            status = 415
        elif isinstance(exc, DocumentCorruptedError):
            status = 422
        else:
            status = 400
        return JSONResponse(status_code=status, content=exc.to_dict())

    # -----------------------------------------------------------------------
    # Fields
    # -----------------------------------------------------------------------

    @app.post("/api/fields/extract")
    async def extract(request: ContentRequest) -> Dict[str, Any]:
        """Placeholder fields of the content, in first-appearance order."""
        return {"fields": [f.to_dict() for f in extract_fields(request.content)]}

    @app.post("/api/fields/apply")
    async def apply_fields(request: ApplyFieldsRequest) -> Dict[str, Any]:
        """Fill placeholders with values, or render a preview."""
        fields = _to_fields(request.fields)
        if request.preview:
            content = render_preview(request.content, fields, request.values)
        else:
            content = apply_field_values(request.content, fields, request.values)
        return {"content": content}

    # -----------------------------------------------------------------------
    # Sections
    # -----------------------------------------------------------------------

    @app.post("/api/sections/detect")
    async def detect(request: ContentRequest) -> Dict[str, Any]:
        sections = detector.detect(request.content)
        return {"sections": [s.to_dict() for s in sections]}

    @app.post("/api/sections/reorder")
    async def reorder_sections(request: ReorderRequest) -> Dict[str, Any]:
        result = auto_reorder(request.content, request.title, library)
        return {
            "content": result.content,
            "status": result.status.value,
            "section_count": result.section_count,
        }

    @app.post("/api/sections/move")
    async def move(request: MoveSectionRequest) -> Dict[str, Any]:
        sections = detector.detect(request.content)
        content = move_section(
            sections,
            request.index,
            request.direction,
            title=request.title,
            content=request.content,
        )
        return {"content": content, "moved": content != request.content}

    # -----------------------------------------------------------------------
    # Checker and metrics
    # -----------------------------------------------------------------------

    @app.post("/api/check")
    async def check(request: ContentRequest) -> Dict[str, Any]:
        return checker.report(request.content).to_dict()

    @app.post("/api/check/fix")
    async def fix(request: FixRequest) -> Dict[str, Any]:
        active = checker
        if not request.literal_contractions:
            active = ContractChecker(
                misspellings=library.misspellings, literal_contractions=False
            )
        issues = None
        if request.issues is not None:
            try:
                issues = [CheckIssue.from_dict(item) for item in request.issues]
            except (KeyError, ValueError) as exc:
                raise HTTPException(status_code=422, detail=f"Invalid issue: {exc}") from exc
        return {"content": active.auto_fix_all(request.content, issues)}

    @app.post("/api/score")
    async def score(request: ScoreRequest) -> Dict[str, Any]:
        return {
            "score": validation_score(request.content, request.values, library),
            "checklist": [item.to_dict() for item in checklist_status(request.content, library)],
            "unfilled": unfilled_placeholders(request.content, request.values),
            "spelling": [w.to_dict() for w in spelling_warnings(request.content, library)],
            "legal_terms": [
                {"term": t.term, "definition": t.definition, "example": t.example}
                for t in legal_terms_in_content(request.content, library)
            ],
        }

    @app.post("/api/payment-section")
    async def payment_section(request: PaymentSectionRequest) -> Dict[str, Any]:
        config = CompensationConfig.from_dict(request.compensation)
        section = generate_from_config(config)
        payload: Dict[str, Any] = {"section": section}
        if request.content is not None:
            content = insert_payment_section(request.content, section)
            payload["content"] = content
            payload["inserted"] = content != request.content
        return payload

    # -----------------------------------------------------------------------
    # Import / export
    # -----------------------------------------------------------------------

    @app.post("/api/import")
    async def import_file(
        file: UploadFile = File(..., description="Contract file (.txt/.docx/.pdf)"),
    ) -> Dict[str, Any]:
        temp_dir = Path(tempfile.gettempdir()) / "contract_wizard_api"
        temp_dir.mkdir(parents=True, exist_ok=True)
        path = _save_upload_to_temp(file, temp_dir)
        try:
            imported = import_contract(path)
        finally:
            path.unlink(missing_ok=True)
        return {
            "title": imported.title,
            "content": imported.content,
            "fields": [f.to_dict() for f in extract_fields(imported.content)],
        }

    @app.post("/api/export")
    async def export(request: ExportRequest) -> FileResponse:
        content = render_preview(request.content, _to_fields(request.fields), request.values)
        filename = export_filename(request.title, f".{request.format}")
        temp_dir = Path(tempfile.mkdtemp(prefix="contract_wizard_export_"))
        target = temp_dir / filename
        if request.format == "docx":
            export_docx(request.title, content, target)
        else:
            export_text(request.title, content, target)
        return FileResponse(
            path=target,
            filename=filename,
            media_type=EXPORT_MEDIA_TYPES[request.format],
        )

    # -----------------------------------------------------------------------
    # Drafts
    # -----------------------------------------------------------------------

    @app.get("/api/drafts")
    async def list_drafts() -> Dict[str, Any]:
        return {"drafts": _repository().list()}

    @app.post("/api/drafts")
    async def save_draft(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
        draft = _repository().save(payload)
        if draft is None:
            raise HTTPException(status_code=404, detail="Draft not found")
        return {"draft": draft}

    @app.get("/api/drafts/{draft_id}")
    async def get_draft(draft_id: str) -> Dict[str, Any]:
        draft = _repository().get(draft_id)
        if draft is None:
            raise HTTPException(status_code=404, detail="Draft not found")
        return {"draft": draft}

    @app.delete("/api/drafts")
    async def delete_drafts(id: Optional[str] = None) -> Dict[str, Any]:
        """Delete one draft by ``id``, or every draft when no id is given."""
        repository = _repository()
        if id is None:
            return {"success": True, "deleted": repository.delete_all()}
        if not repository.delete(id):
            raise HTTPException(status_code=404, detail="Draft not found")
        return {"success": True, "deleted": 1}

    # -----------------------------------------------------------------------
    # Library
    # -----------------------------------------------------------------------

    @app.get("/api/library")
    async def get_library() -> Dict[str, Any]:
        return config_manager.to_dict()

    logger.info(f"Contract wizard API ready ({len(library.sections)} checklist sections)")
    return app


app = create_app()
