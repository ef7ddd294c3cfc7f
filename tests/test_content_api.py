import pytest

from portfolio_cms.models.skill import Skill


def test_site_config_never_exposes_setup_key(client, admin_client):
    r = client.get("/api/site-config")
    assert r.status_code == 200
    assert r.json()["siteName"] == "Portfolio"
    assert "setupKey" not in r.json()

    r = admin_client.patch("/api/admin/site-config", json={"siteName": "Jane's Portfolio", "setupKey": "rotated-key"})
    assert r.status_code == 200
    assert r.json()["siteName"] == "Jane's Portfolio"
    assert "setupKey" not in r.json()


def test_rotated_setup_key_gates_new_admins(admin_client, make_client):
    admin_client.patch("/api/admin/site-config", json={"setupKey": "rotated-key"})

    c = make_client()
    new_admin = {"username": "admin2", "email": "b@x.com", "password": "secret3", "isAdmin": True}
    assert c.post("/api/register", json={**new_admin, "setupKey": "changeme"}).status_code == 403
    assert c.post("/api/register", json={**new_admin, "setupKey": "rotated-key"}).status_code == 201


@pytest.mark.parametrize("path", ["/api/hero", "/api/about", "/api/contact-info"])
def test_public_sections_initialize_on_first_read(client, path):
    first = client.get(path)
    assert first.status_code == 200
    second = client.get(path)
    assert second.json()["id"] == first.json()["id"]


def test_admin_updates_sections_partially(client, admin_client):
    r = admin_client.patch("/api/admin/hero", json={"name": "Jane Doe"})
    assert r.status_code == 404  # nothing to update before the first read

    client.get("/api/hero")
    r = admin_client.patch("/api/admin/hero", json={"name": "Jane Doe"})
    assert r.status_code == 200
    assert r.json()["name"] == "Jane Doe"
    assert r.json()["greeting"] == "Hello, I'm"

    client.get("/api/about")
    r = admin_client.patch("/api/admin/about", json={
        "bio": "Writes code.",
        "details": [{"icon": "mail", "label": "Email", "value": "jane@x.com"}],
        "socialLinks": [{"platform": "github", "url": "https://github.com/jane", "icon": "github"}],
    })
    assert r.status_code == 200
    assert r.json()["details"] == [{"icon": "mail", "label": "Email", "value": "jane@x.com"}]
    assert r.json()["socialLinks"][0]["url"] == "https://github.com/jane"
    assert client.get("/api/about").json()["bio"] == "Writes code."


def test_section_updates_are_admin_only(client, user_client):
    assert client.patch("/api/admin/hero", json={"name": "X"}).status_code == 401
    assert user_client.patch("/api/admin/hero", json={"name": "X"}).status_code == 403
    assert client.patch("/api/admin/site-config", json={"siteName": "X"}).status_code == 401


def test_patch_skill_gate_and_update(client, user_client, admin_client, db):
    # The gate answers before the skill is even looked up
    assert client.patch("/api/admin/skills/5", json={"name": "Rust", "categoryId": 2}).status_code == 401
    assert user_client.patch("/api/admin/skills/5", json={"name": "Rust", "categoryId": 2}).status_code == 403

    for name in ("Frontend", "Systems"):
        assert admin_client.post("/api/admin/skill-categories", json={"name": name, "icon": "code"}).status_code == 201
    for name in ("HTML", "CSS", "JS", "TS", "C"):
        assert admin_client.post("/api/admin/skills", json={"name": name, "categoryId": 1}).status_code == 201

    r = admin_client.patch("/api/admin/skills/5", json={"name": "Rust", "categoryId": 2})
    assert r.status_code == 200
    assert r.json()["id"] == 5
    assert r.json()["name"] == "Rust"
    assert r.json()["categoryId"] == 2
    assert db.get(Skill, 5).name == "Rust"


def test_skill_crud(client, admin_client):
    r = admin_client.post("/api/admin/skill-categories", json={"name": "Backend", "icon": "server"})
    category_id = r.json()["id"]

    r = admin_client.post("/api/admin/skills", json={"name": "Python", "categoryId": category_id})
    assert r.status_code == 201
    skill_id = r.json()["id"]

    assert client.get("/api/skills").json()[0]["name"] == "Python"
    assert client.get(f"/api/skills/{skill_id}").json()["categoryId"] == category_id
    assert client.get("/api/skills/999").status_code == 404

    r = admin_client.post("/api/admin/skills", json={"name": "Go", "categoryId": 999})
    assert r.status_code == 400

    assert admin_client.delete(f"/api/admin/skills/{skill_id}").status_code == 204
    assert admin_client.delete(f"/api/admin/skills/{skill_id}").status_code == 204
    assert client.get("/api/skills").json() == []


def test_deleting_category_removes_its_skills(client, admin_client):
    web = admin_client.post("/api/admin/skill-categories", json={"name": "Web", "icon": "globe"}).json()
    data = admin_client.post("/api/admin/skill-categories", json={"name": "Data", "icon": "db"}).json()
    admin_client.post("/api/admin/skills", json={"name": "React", "categoryId": web["id"]})
    admin_client.post("/api/admin/skills", json={"name": "SQL", "categoryId": data["id"]})

    assert admin_client.delete(f"/api/admin/skill-categories/{web['id']}").status_code == 204

    assert [s["name"] for s in client.get("/api/skills").json()] == ["SQL"]
    assert [c["name"] for c in client.get("/api/skill-categories").json()] == ["Data"]


def test_experience_technologies_are_replaced(client, admin_client):
    r = admin_client.post("/api/admin/experiences", json={
        "title": "Engineer",
        "company": "Acme",
        "location": "Berlin",
        "startDate": "2020-01",
        "description": "Built the platform",
        "technologies": ["A", "B"],
    })
    assert r.status_code == 201
    experience = r.json()
    assert experience["technologies"] == ["A", "B"]
    assert experience["type"] == "Full-time"
    assert experience["endDate"] is None

    r = admin_client.patch(f"/api/admin/experiences/{experience['id']}", json={"technologies": ["C"]})
    assert r.status_code == 200
    assert r.json()["technologies"] == ["C"]
    assert client.get(f"/api/experiences/{experience['id']}").json()["technologies"] == ["C"]


def test_project_crud(client, admin_client):
    r = admin_client.post("/api/admin/projects", json={
        "title": "Portfolio",
        "description": "This site",
        "demoLink": "https://example.com",
        "repoLink": "https://github.com/jane/portfolio",
        "technologies": ["FastAPI", "React"],
    })
    assert r.status_code == 201
    project_id = r.json()["id"]

    listed = client.get("/api/projects").json()
    assert listed[0]["technologies"] == ["FastAPI", "React"]
    assert listed[0]["demoLink"] == "https://example.com"

    r = admin_client.patch(f"/api/admin/projects/{project_id}", json={"title": "Portfolio v2"})
    assert r.json()["title"] == "Portfolio v2"
    assert r.json()["technologies"] == ["FastAPI", "React"]

    assert admin_client.patch("/api/admin/projects/999", json={"title": "x"}).status_code == 404
    assert admin_client.delete(f"/api/admin/projects/{project_id}").status_code == 204
    assert client.get(f"/api/projects/{project_id}").status_code == 404


def test_invalid_content_is_rejected_with_400(admin_client, client):
    r = admin_client.post("/api/admin/projects", json={"title": "No description"})
    assert r.status_code == 400
    assert "description" in r.json()["message"]

    r = admin_client.post("/api/admin/skill-categories", json={"name": "", "icon": "x"})
    assert r.status_code == 400

    assert client.get("/api/projects").json() == []


def test_mutations_are_admin_only(client, user_client):
    payload = {"name": "X", "icon": "x"}
    assert client.post("/api/admin/skill-categories", json=payload).status_code == 401
    assert user_client.post("/api/admin/skill-categories", json=payload).status_code == 403
    assert client.delete("/api/admin/projects/1").status_code == 401
    assert user_client.delete("/api/admin/experiences/1").status_code == 403


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_null_for_required_fields_is_rejected(client, admin_client):
    for path in ("/api/hero", "/api/about"):
        client.get(path)
    category = admin_client.post("/api/admin/skill-categories", json={"name": "Web", "icon": "globe"}).json()
    skill = admin_client.post("/api/admin/skills", json={"name": "HTML", "categoryId": category["id"]}).json()
    project = admin_client.post("/api/admin/projects", json={"title": "Site", "description": "Mine"}).json()
    experience = admin_client.post("/api/admin/experiences", json={
        "title": "Engineer",
        "company": "Acme",
        "location": "Berlin",
        "startDate": "2020-01",
        "description": "Built things",
    }).json()

    cases = [
        ("/api/admin/hero", {"name": None}),
        ("/api/admin/about", {"bio": None}),
        ("/api/admin/site-config", {"setupKey": None}),
        ("/api/admin/site-config", {"siteName": None}),
        (f"/api/admin/skill-categories/{category['id']}", {"name": None}),
        (f"/api/admin/skills/{skill['id']}", {"categoryId": None}),
        (f"/api/admin/projects/{project['id']}", {"title": None}),
        (f"/api/admin/experiences/{experience['id']}", {"company": None}),
    ]
    for path, body in cases:
        r = admin_client.patch(path, json=body)
        assert r.status_code == 400, (path, r.text)
        assert r.json()["message"].startswith("Validation error")

    assert client.get("/api/hero").json()["name"] == "John Doe"
    assert client.get(f"/api/skills/{skill['id']}").json()["categoryId"] == category["id"]
    assert client.get(f"/api/experiences/{experience['id']}").json()["company"] == "Acme"


def test_null_for_optional_fields_clears_them(client, admin_client):
    project = admin_client.post("/api/admin/projects", json={
        "title": "Site",
        "description": "Mine",
        "demoLink": "https://example.com",
    }).json()

    r = admin_client.patch(f"/api/admin/projects/{project['id']}", json={"demoLink": None})
    assert r.status_code == 200
    assert r.json()["demoLink"] is None
