import pytest

pytestmark = pytest.mark.asyncio

BODY = "<h1>Argument</h1><p>The motion should be granted.</p>"


@pytest.fixture
def payload(caption_data, attorney, services):
    return {
        "court_id": "ndcal",
        "body": BODY,
        "caption": caption_data.model_dump(mode="json"),
        "attorney": attorney.model_dump(mode="json"),
        "services": [s.model_dump(mode="json") for s in services],
    }


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "courts": 12}


# --- Courts ---

async def test_list_courts(client):
    response = await client.get("/api/courts")
    assert response.status_code == 200
    courts = response.json()
    assert len(courts) == 12
    assert courts[0]["id"] == "scotus"
    assert set(courts[0]) == {"id", "court_name", "court_level", "jurisdiction", "local_rules_citation"}


async def test_list_courts_filtered(client):
    response = await client.get("/api/courts", params={"jurisdiction": "california", "level": "state_trial"})
    assert [c["id"] for c in response.json()] == ["ca-lasc"]

    response = await client.get("/api/courts", params={"q": "new york", "level": "district"})
    assert [c["id"] for c in response.json()] == ["sdny"]


async def test_list_courts_rejects_unknown_level(client):
    response = await client.get("/api/courts", params={"level": "galactic"})
    assert response.status_code == 422


async def test_list_jurisdictions(client):
    response = await client.get("/api/courts/jurisdictions")
    assert response.status_code == 200
    assert response.json()[0] == "Federal"
    assert "Texas" in response.json()


async def test_get_court(client):
    response = await client.get("/api/courts/ndcal")
    assert response.status_code == 200
    court = response.json()
    assert court["jurisdiction"] == "N.D. Cal."
    assert court["document_overrides"]["brief"]["page"]["max_pages"] == 35


async def test_get_unknown_court(client):
    response = await client.get("/api/courts/atlantis")
    assert response.status_code == 404
    assert "atlantis" in response.json()["detail"]


# --- Formatting ---

async def test_format_document(client, payload):
    response = await client.post("/api/formatting/format", json=payload)
    assert response.status_code == 200
    formatted = response.json()
    assert "UNITED STATES DISTRICT COURT" in formatted["caption"]
    assert "CERTIFICATE OF SERVICE" in formatted["certificate_of_service"]
    assert formatted["table_of_contents"] is None
    assert formatted["word_count"] == 6
    assert formatted["page_count"] == 1
    assert formatted["compliance"]["is_compliant"] is True


async def test_format_unknown_court(client, payload):
    response = await client.post("/api/formatting/format", json={**payload, "court_id": "atlantis"})
    assert response.status_code == 404


async def test_format_validates_payload(client, payload):
    response = await client.post("/api/formatting/format", json={**payload, "document_type": "limerick"})
    assert response.status_code == 422


async def test_format_auto_headings(client, payload):
    response = await client.post(
        "/api/formatting/format",
        json={**payload, "court_id": "scotus", "auto_headings": True, "citations": []},
    )
    formatted = response.json()
    assert "TABLE OF CONTENTS" in formatted["table_of_contents"]
    assert "Argument" in formatted["table_of_contents"]
    assert "TABLE OF AUTHORITIES" in formatted["table_of_authorities"]
    assert formatted["word_count_declaration"] is not None


async def test_validate(client):
    response = await client.post(
        "/api/formatting/validate",
        json={"court_id": "ndcal", "content": "Respectfully submitted,  John Doe"},
    )
    assert response.status_code == 200
    result = response.json()
    assert result["is_compliant"] is False
    assert [v["rule"] for v in result["violations"]] == ["Certificate of Service"]
    assert [w["rule"] for w in result["warnings"]] == ["Formatting"]


async def test_validate_unknown_court(client):
    response = await client.post("/api/formatting/validate", json={"court_id": "atlantis", "content": ""})
    assert response.status_code == 404


async def test_export(client, payload):
    response = await client.post("/api/formatting/export", json={**payload, "title": "Motion to Dismiss"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text.startswith("<!DOCTYPE html>")
    assert "<title>Motion to Dismiss</title>" in response.text
    assert "The motion should be granted." in response.text
