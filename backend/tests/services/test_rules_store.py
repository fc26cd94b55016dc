import json

import pytest

from courtdocs.core.config import settings
from courtdocs.services.formatting.captions import generate_caption_for_jurisdiction
from courtdocs.services.formatting.models import CourtLevel, DocumentCategory
from courtdocs.services.formatting.rules_store import CourtRulesStore, get_court_rules_store


@pytest.fixture(scope="module")
def store():
    return CourtRulesStore.from_file(settings.COURT_RULES_PATH)


def _ids(profiles):
    return [p.id for p in profiles]


def test_dataset_loads(store):
    assert len(store) == 12
    assert _ids(store.get_all())[:3] == ["scotus", "9th-circuit", "ndcal"]


def test_cached_store_uses_configured_dataset():
    assert len(get_court_rules_store()) == 12
    assert get_court_rules_store() is get_court_rules_store()


def test_get_by_id(store):
    ndcal = store.get_by_id("ndcal")
    assert ndcal.court_name == "United States District Court for the Northern District of California"
    assert ndcal.court_level == CourtLevel.DISTRICT
    assert store.get_by_id("nowhere") is None


def test_get_by_jurisdiction_is_case_insensitive_substring(store):
    assert _ids(store.get_by_jurisdiction("california")) == ["ca-supreme", "ca-appeal", "ca-lasc"]
    assert _ids(store.get_by_jurisdiction("NEW YORK")) == ["ny-appeals", "ny-supreme"]
    assert store.get_by_jurisdiction("Ohio") == []


def test_get_by_level(store):
    assert _ids(store.get_by_level(CourtLevel.STATE_SUPREME)) == ["ca-supreme", "ny-appeals", "tx-supreme"]
    assert _ids(store.get_by_level("appellate")) == ["9th-circuit"]


def test_federal_and_state_partition(store):
    federal = _ids(store.get_federal())
    state = _ids(store.get_state())
    assert federal == ["scotus", "9th-circuit", "ndcal", "sdny", "cdcal", "dde"]
    assert len(federal) + len(state) == len(store)
    assert not set(federal) & set(state)


def test_search_matches_name_or_jurisdiction(store):
    assert _ids(store.search("new york")) == ["sdny", "ny-appeals", "ny-supreme"]
    assert _ids(store.search("los angeles")) == ["ca-lasc"]
    assert store.search("atlantis") == []


def test_jurisdictions_are_distinct_in_first_seen_order(store):
    jurisdictions = store.jurisdictions()
    assert jurisdictions[0] == "Federal"
    assert len(jurisdictions) == len(set(jurisdictions))
    assert jurisdictions.count("California") == 1


def test_dataset_overrides(store):
    ndcal = store.get_by_id("ndcal")
    assert ndcal.for_document(DocumentCategory.MOTION).page.max_pages == 25
    assert ndcal.for_document(DocumentCategory.BRIEF).page.max_pages == 35
    assert ndcal.for_document(DocumentCategory.BRIEF).font == ndcal.font


def test_every_profile_renders_a_caption(store, caption_data):
    for profile in store.get_all():
        assert 'class="caption' in generate_caption_for_jurisdiction(caption_data, profile)


def test_duplicate_ids_rejected(rules):
    with pytest.raises(ValueError, match="Duplicate court rule id"):
        CourtRulesStore([rules, rules])


def test_from_file(tmp_path, rules):
    path = tmp_path / "rules.json"
    record = rules.model_dump(mode="json")
    path.write_text(json.dumps([record, {**record, "id": "second"}]), encoding="utf-8")
    store = CourtRulesStore.from_file(path)
    assert _ids(store.get_all()) == ["test-district", "second"]


def test_from_file_rejects_invalid_records(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps([{"id": "broken"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        CourtRulesStore.from_file(path)
