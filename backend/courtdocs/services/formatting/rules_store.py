"""
Court Rules Store
Read-only lookup over the court formatting rule dataset.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Union

from courtdocs.core.config import settings
from courtdocs.services.formatting.models import CourtLevel, FEDERAL_LEVELS, RuleProfile

logger = logging.getLogger(__name__)


class CourtRulesStore:
    def __init__(self, profiles: Iterable[RuleProfile]):
        self._profiles: List[RuleProfile] = list(profiles)
        self._by_id = {}
        for profile in self._profiles:
            if profile.id in self._by_id:
                raise ValueError(f"Duplicate court rule id in dataset: {profile.id}")
            self._by_id[profile.id] = profile

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CourtRulesStore":
        """Load and validate a JSON array of rule profiles."""
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
        store = cls(RuleProfile.model_validate(record) for record in records)
        logger.info(f"Loaded {len(store)} court rule profiles from {path}")
        return store

    def __len__(self) -> int:
        return len(self._profiles)

    def get_all(self) -> List[RuleProfile]:
        return list(self._profiles)

    def get_by_id(self, court_id: str) -> Optional[RuleProfile]:
        return self._by_id.get(court_id)

    def get_by_jurisdiction(self, jurisdiction: str) -> List[RuleProfile]:
        needle = jurisdiction.lower()
        return [p for p in self._profiles if needle in p.jurisdiction.lower()]

    def get_by_level(self, level: CourtLevel) -> List[RuleProfile]:
        level = CourtLevel(level)
        return [p for p in self._profiles if p.court_level == level]

    def get_federal(self) -> List[RuleProfile]:
        return [p for p in self._profiles if p.court_level in FEDERAL_LEVELS]

    def get_state(self) -> List[RuleProfile]:
        return [p for p in self._profiles if p.court_level not in FEDERAL_LEVELS]

    def search(self, query: str) -> List[RuleProfile]:
        """Match against court name or jurisdiction"""
        needle = query.lower()
        return [
            p for p in self._profiles
            if needle in p.court_name.lower() or needle in p.jurisdiction.lower()
        ]

    def jurisdictions(self) -> List[str]:
        # dict keeps first-seen order
        return list(dict.fromkeys(p.jurisdiction for p in self._profiles))


@lru_cache()
def get_court_rules_store() -> CourtRulesStore:
    """Cached store over the configured dataset"""
    return CourtRulesStore.from_file(settings.COURT_RULES_PATH)
