from fastapi.testclient import TestClient


def create_page(client: TestClient, headers, **overrides):
    body = {"title": "Study in Canada", "content": "<p>Everything about Canadian study permits.</p>"}
    response = client.post("/api/admin/content/pages", json={**body, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_admin_creates_pages_with_unique_slugs(client: TestClient, admin_headers):
    first = create_page(client, admin_headers)
    second = create_page(client, admin_headers)
    assert first["slug"] == "study-in-canada"
    assert second["slug"] == "study-in-canada-2"
    assert first["published_at"] is None


def test_explicit_duplicate_slug_is_rejected(client: TestClient, admin_headers):
    create_page(client, admin_headers, slug="canada")
    response = client.post(
        "/api/admin/content/pages",
        json={"title": "Canada again", "content": "Duplicate", "slug": "canada"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "A page with this slug already exists"


def test_public_sees_only_published_pages(client: TestClient, admin_headers):
    create_page(client, admin_headers, title="Visa Guide", is_published=True)
    create_page(client, admin_headers, title="Draft Page")

    public = client.get("/api/content/pages").json()["data"]
    assert [p["title"] for p in public] == ["Visa Guide"]
    assert public[0]["published_at"] is not None

    page = client.get("/api/content/pages/visa-guide")
    assert page.status_code == 200
    assert page.json()["data"]["title"] == "Visa Guide"

    draft = client.get("/api/content/pages/draft-page")
    assert draft.status_code == 404
    assert draft.json()["error"]["message"] == "Page not found"


def test_page_edits_refresh_the_public_copy(client: TestClient, admin_headers):
    page = create_page(client, admin_headers, title="Scholarships", is_published=True)
    assert client.get("/api/content/pages/scholarships").json()["data"]["excerpt"] is None

    client.put(
        f"/api/admin/content/pages/{page['id']}",
        json={"excerpt": "Funding for 2027 intakes"},
        headers=admin_headers,
    )
    assert client.get("/api/content/pages/scholarships").json()["data"]["excerpt"] == "Funding for 2027 intakes"

    client.put(f"/api/admin/content/pages/{page['id']}", json={"is_published": False}, headers=admin_headers)
    assert client.get("/api/content/pages/scholarships").status_code == 404
