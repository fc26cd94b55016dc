import pytest
import sys
from pathlib import Path
from httpx import ASGITransport, AsyncClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from courtdocs.main import app
from courtdocs.services.formatting.models import (
    AttorneyInfo, CaptionData, Party, RuleProfile, ServiceInfo
)

BASE_RULES = {
    "id": "test-district",
    "court_name": "United States District Court for the Test District",
    "court_level": "district",
    "jurisdiction": "N.D. Cal.",
    "local_rules_citation": "T.D. L.R. 1-1",
    "font": {"family": ["Times New Roman", "Arial"], "size_body": 12, "size_footnotes": 10, "line_height": 2},
    "margins": {"top": 1, "bottom": 1, "left": 1, "right": 1},
    "page": {"size": "letter", "orientation": "portrait", "numbering": "bottom-center", "numbering_start_page": 2},
    "caption": {
        "format": "federal",
        "include_court_name": True,
        "include_case_number": True,
        "include_judge_name": True,
        "include_department": False,
        "party_format": "v",
        "all_caps": True,
    },
    "signature": {
        "format": "block",
        "include_bar_number": True,
        "include_address": True,
        "include_phone": True,
        "include_email": True,
        "include_fax": False,
    },
    "certificate_of_service": {"required": True, "format": "certificate", "methods": ["ecf", "mail"]},
    "last_updated": "2024-01-01",
}


def make_rules(**overrides) -> RuleProfile:
    """Test profile with top-level fields replaced by the given overrides."""
    return RuleProfile.model_validate({**BASE_RULES, **overrides})


@pytest.fixture
def rules() -> RuleProfile:
    return make_rules()


@pytest.fixture
def caption_data() -> CaptionData:
    return CaptionData(
        court_name="United States District Court",
        court_division="Northern District of California",
        judge_name="Jane Smith",
        case_number="3:24-cv-01234",
        plaintiffs=[Party(name="ABC Corporation", role="plaintiff", is_lead_party=True)],
        defendants=[Party(name="XYZ Industries", role="defendant", is_lead_party=True)],
        document_title="Motion for Summary Judgment",
    )


@pytest.fixture
def attorney() -> AttorneyInfo:
    return AttorneyInfo(
        name="John Doe",
        bar_number="123456",
        bar_state="CA",
        firm_name="Doe & Associates LLP",
        address=["100 Main Street", "Suite 500", "San Francisco, CA 94105"],
        phone="(415) 555-0100",
        fax="(415) 555-0101",
        email="jdoe@doelaw.com",
        representing_party="Plaintiff ABC Corporation",
    )


@pytest.fixture
def services():
    return [
        ServiceInfo(method="ecf", recipient_name="Jane Attorney", date="2024-03-01"),
        ServiceInfo(
            method="email",
            recipient_name="Richard Roe",
            recipient_address="200 Market Street, San Francisco, CA",
            recipient_email="rroe@roelaw.com",
            date="2024-03-01",
        ),
    ]


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Test client for the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def rules_factory():
    return make_rules
