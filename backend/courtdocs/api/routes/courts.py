from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import List, Optional

from courtdocs.services.formatting.models import CourtLevel, RuleProfile
from courtdocs.services.formatting.rules_store import CourtRulesStore, get_court_rules_store

router = APIRouter()


class CourtSummary(BaseModel):
    id: str
    court_name: str
    court_level: CourtLevel
    jurisdiction: str
    local_rules_citation: Optional[str] = None


@router.get("", response_model=List[CourtSummary])
async def list_courts(
    jurisdiction: Optional[str] = None,
    level: Optional[CourtLevel] = None,
    q: Optional[str] = None,
    store: CourtRulesStore = Depends(get_court_rules_store),
):
    """
    List courts, optionally narrowed by jurisdiction substring, court level or free-text query.
    """
    courts = store.get_by_jurisdiction(jurisdiction) if jurisdiction else store.get_all()
    if level:
        courts = [c for c in courts if c.court_level == level]
    if q:
        matching = {c.id for c in store.search(q)}
        courts = [c for c in courts if c.id in matching]
    return [CourtSummary.model_validate(c, from_attributes=True) for c in courts]


@router.get("/jurisdictions", response_model=List[str])
async def list_jurisdictions(store: CourtRulesStore = Depends(get_court_rules_store)):
    return store.jurisdictions()


@router.get("/{court_id}", response_model=RuleProfile)
async def get_court(court_id: str, store: CourtRulesStore = Depends(get_court_rules_store)):
    court = store.get_by_id(court_id)
    if court is None:
        raise HTTPException(status_code=404, detail=f"Court not found: {court_id}")
    return court
