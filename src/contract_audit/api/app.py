"""FastAPI application for the Contract Audit System.

Exposes the audit engine over HTTP: upload a PDF, Word, or plain-text
contract together with a rule selector and receive the extracted text and
the flags raised against it.

Usage (from project root, after installing the package):

    uvicorn contract_audit.api.app:app --reload

Then send a multipart/form-data POST request to /api/analyze with a
`file` field and an optional `rule` field.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from ..analysis import AuditEngine
from ..config.config_manager import configure_logging, settings_from_env
from ..config.models import AuditSettings
from ..extraction.base import TextExtractor
from ..extraction.exceptions import DocumentCorruptedError, ExtractionError
from ..interfaces.extractor import ITextExtractor
from ..models.document import WHITESPACE
from ..rules.registry import AUDIT_RULE_OPTIONS
from ..serialization import result_to_payload


logger = logging.getLogger(__name__)

MISSING_FILE_ERROR = "Missing file in request."
EXTRACTION_ERROR = (
    "Unable to extract text from this file. Please upload a text-searchable "
    "PDF or Word document."
)
TOO_LARGE_ERROR = "File is too large to analyze."
UNEXPECTED_ERROR = (
    "Unexpected error while analyzing document. Please try again with another file."
)

READ_CHUNK_SIZE = 64 * 1024


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _read_upload(upload: UploadFile, limit: int) -> Optional[bytes]:
    """Read an upload in chunks; None once it grows past ``limit`` bytes."""
    if upload.size is not None and upload.size > limit:
        return None
    buffer = bytearray()
    while True:
        chunk = await upload.read(READ_CHUNK_SIZE)
        if not chunk:
            return bytes(buffer)
        buffer.extend(chunk)
        if len(buffer) > limit:
            return None


def create_app(
    settings: Optional[AuditSettings] = None,
    extractor: Optional[ITextExtractor] = None,
    engine: Optional[AuditEngine] = None,
) -> FastAPI:
    """
    Build the audit API.

    Args:
        settings: Runtime settings; read from the environment if omitted.
        extractor: Text extractor; TextExtractor if omitted.
        engine: Audit engine; a default AuditEngine if omitted.
    """
    settings = settings or settings_from_env()
    configure_logging(settings)
    extractor = extractor or TextExtractor()
    engine = engine or AuditEngine()

    api = FastAPI(title="Contract Audit API", version="0.1.0")

    @api.get("/api/rules")
    async def list_rules() -> JSONResponse:
        """List the selectable audit rules with their display labels."""
        return JSONResponse(status_code=200, content={"rules": AUDIT_RULE_OPTIONS})

    @api.post("/api/analyze")
    async def analyze_document(request: Request) -> JSONResponse:
        """Extract text from an uploaded contract and audit it.

        Form fields: ``file`` (required upload) and ``rule`` (optional id or
        label). A ``file`` field that is not an upload is treated as missing.
        Unknown rule selectors are audited with the liability rule. Internal
        error details are logged, never returned.
        """
        try:
            form = await request.form()
        except Exception:  # noqa: BLE001
            logger.exception("Could not parse form data")
            return _error(400, MISSING_FILE_ERROR)

        file = form.get("file")
        if not isinstance(file, UploadFile):
            return _error(400, MISSING_FILE_ERROR)

        rule = form.get("rule")
        if not isinstance(rule, str):
            rule = settings.default_rule

        filename = file.filename or "document"
        media_type = file.content_type or ""

        try:
            data = await _read_upload(file, settings.max_upload_bytes)
            if data is None:
                logger.warning(
                    f"Rejected upload {filename}: exceeds {settings.max_upload_bytes} bytes"
                )
                return _error(413, TOO_LARGE_ERROR)

            try:
                text = extractor.extract(data, media_type, filename)
            except ExtractionError as exc:
                logger.warning(f"Text extraction failed: {exc.to_dict()}")
                if isinstance(exc, DocumentCorruptedError):
                    for suggestion in exc.get_recovery_suggestions():
                        logger.info(f"Recovery suggestion for {filename}: {suggestion}")
                return _error(422, EXTRACTION_ERROR)

            if not text.strip(WHITESPACE):
                logger.info(f"No text extracted from {filename}")
                return _error(422, EXTRACTION_ERROR)

            result = engine.analyze(text, rule)
            return JSONResponse(status_code=200, content=result_to_payload(result))

        except Exception:  # noqa: BLE001
            logger.exception(f"Unexpected error while analyzing {filename}")
            return _error(500, UNEXPECTED_ERROR)

        finally:
            await file.close()

    return api


app = create_app()
