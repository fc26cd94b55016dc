import logging
from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
from typing import Any, List, Optional

from courtdocs.services.formatting.blocks import extract_headings
from courtdocs.services.formatting.models import (
    AttorneyInfo, CaptionData, Citation, ComplianceResult, DocumentCategory,
    FormattedDocument, Heading, RuleProfile, ServiceInfo
)
from courtdocs.services.formatting.rules_store import CourtRulesStore, get_court_rules_store
from courtdocs.services.formatting.service import formatting_service
from courtdocs.services.formatting.validator import ComplianceValidator

logger = logging.getLogger(__name__)

router = APIRouter()


class FormatRequest(BaseModel):
    court_id: str = Field(..., description="Rule profile id, e.g. 'ndcal'")
    body: str = Field(..., description="Document body (HTML)")
    caption: CaptionData
    attorney: AttorneyInfo
    services: List[ServiceInfo] = []
    headings: Optional[List[Heading]] = None
    citations: Optional[List[Citation]] = None
    document_type: Optional[DocumentCategory] = None
    auto_headings: bool = Field(default=False, description="Build the TOC from <h1>-<h4> tags in the body")


class ExportRequest(FormatRequest):
    title: str = Field(..., description="Title of the exported HTML document")


class ValidateRequest(BaseModel):
    court_id: str
    content: str
    document_type: Optional[DocumentCategory] = None


def _require_court(court_id: str, store: CourtRulesStore) -> RuleProfile:
    court = store.get_by_id(court_id)
    if court is None:
        raise HTTPException(status_code=404, detail=f"Court not found: {court_id}")
    return court


def _format(request: FormatRequest, rules: RuleProfile) -> FormattedDocument:
    headings = request.headings
    if headings is None and request.auto_headings:
        headings = extract_headings(request.body)
    return formatting_service.format_document(
        request.body,
        request.caption,
        request.attorney,
        request.services,
        rules,
        headings=headings,
        citations=request.citations,
        document_type=request.document_type,
    )


@router.post("/format", response_model=FormattedDocument)
async def format_document(request: FormatRequest, store: CourtRulesStore = Depends(get_court_rules_store)) -> Any:
    """
    Assemble caption, tables, body, signature and certificate for a court and check compliance.
    """
    rules = _require_court(request.court_id, store)
    try:
        return _format(request, rules)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Formatting failed for court '{request.court_id}': {e}")
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")


@router.post("/validate", response_model=ComplianceResult)
async def validate_document(request: ValidateRequest, store: CourtRulesStore = Depends(get_court_rules_store)) -> Any:
    rules = _require_court(request.court_id, store)
    try:
        return ComplianceValidator.validate(
            request.content, rules, request.document_type, formatting_service.words_per_page
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/export", response_class=HTMLResponse)
async def export_document(request: ExportRequest, store: CourtRulesStore = Depends(get_court_rules_store)):
    """Formatted document as a standalone, download-ready HTML page."""
    rules = _require_court(request.court_id, store)
    try:
        formatted = _format(request, rules)
        return HTMLResponse(formatting_service.export_full_document(formatted, rules, request.title))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Export failed for court '{request.court_id}': {e}")
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")
