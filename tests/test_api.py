"""HTTP-level tests: status codes, headers, error bodies and parameter aliases."""


async def _create_skill(client, name):
    response = await client.post("/api/skills/", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


def _candidate_payload(**overrides):
    payload = {
        "full_name": "Marko Markovic",
        "date_of_birth": "1995-11-02",
        "email": "marko@example.com",
        "phone": "+38162123456",
        "skill_ids": [],
    }
    payload.update(overrides)
    return payload


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["checks"]["database"] == "healthy"

    async def test_request_id_echoed(self, client):
        response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestSkillEndpoints:
    async def test_create_and_get(self, client):
        response = await client.post("/api/skills/", json={"name": " Docker "})
        assert response.status_code == 201
        assert response.json()["name"] == "Docker"
        assert response.headers["Location"].endswith(f"/api/skills/{response.json()['id']}")

        fetched = await client.get(f"/api/skills/{response.json()['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == response.json()

    async def test_duplicate_is_409(self, client):
        await _create_skill(client, "React")
        response = await client.post("/api/skills/", json={"name": "react"})
        assert response.status_code == 409
        assert response.json()["error"] == "SKILL_EXISTS"

    async def test_padded_name_at_limit_is_accepted(self, client):
        """Whitespace around a 100 char name is trimmed, not counted."""
        response = await client.post("/api/skills/", json={"name": " " + "k" * 100 + " "})
        assert response.status_code == 201
        assert response.json()["name"] == "k" * 100

    async def test_blank_name_is_422(self, client):
        response = await client.post("/api/skills/", json={"name": "   "})
        assert response.status_code == 422

    async def test_list_with_query_and_total_header(self, client):
        for name in ("Java", "JavaScript", "SQL"):
            await _create_skill(client, name)

        response = await client.get("/api/skills/", params={"query": "java", "pageSize": 1})
        assert response.status_code == 200
        assert response.headers["X-Total-Count"] == "2"
        body = response.json()
        assert [s["name"] for s in body["items"]] == ["Java"]
        assert body["total"] == 2
        assert body["page_size"] == 1

    async def test_update_and_delete(self, client):
        skill_id = await _create_skill(client, "Postgres")

        renamed = await client.put(f"/api/skills/{skill_id}", json={"name": "PostgreSQL"})
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "PostgreSQL"

        deleted = await client.delete(f"/api/skills/{skill_id}")
        assert deleted.status_code == 204

        missing = await client.get(f"/api/skills/{skill_id}")
        assert missing.status_code == 404
        assert missing.json()["error"] == "SKILL_NOT_FOUND"


class TestCandidateEndpoints:
    async def test_create_returns_projection(self, client):
        java = await _create_skill(client, "Java")
        sql = await _create_skill(client, "SQL")

        response = await client.post(
            "/api/candidates/", json=_candidate_payload(skill_ids=[sql, java, sql])
        )
        assert response.status_code == 201
        body = response.json()
        assert body["full_name"] == "Marko Markovic"
        assert body["date_of_birth"] == "1995-11-02"
        assert [s["name"] for s in body["skills"]] == ["Java", "SQL"]
        assert response.headers["Location"].endswith(f"/api/candidates/{body['id']}")

    async def test_create_with_unknown_skills_is_404(self, client):
        response = await client.post("/api/candidates/", json=_candidate_payload(skill_ids=[7, 3]))
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "SKILLS_NOT_FOUND"
        assert body["details"] == {"missing_ids": [3, 7]}

        listing = await client.get("/api/candidates/")
        assert listing.json()["total"] == 0

    async def test_duplicate_email_is_409(self, client):
        await client.post("/api/candidates/", json=_candidate_payload())
        response = await client.post(
            "/api/candidates/", json=_candidate_payload(email="MARKO@example.com")
        )
        assert response.status_code == 409
        assert response.json()["error"] == "EMAIL_EXISTS"

    async def test_invalid_payload_is_422(self, client):
        response = await client.post(
            "/api/candidates/", json=_candidate_payload(email="not-an-email")
        )
        assert response.status_code == 422

        response = await client.post(
            "/api/candidates/", json=_candidate_payload(full_name="x" * 81)
        )
        assert response.status_code == 422

    async def test_get_missing_is_404(self, client):
        response = await client.get("/api/candidates/12345")
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "CANDIDATE_NOT_FOUND"
        assert "message" in body

    async def test_update(self, client):
        created = (await client.post("/api/candidates/", json=_candidate_payload())).json()
        response = await client.put(
            f"/api/candidates/{created['id']}",
            json=_candidate_payload(full_name="Marko Jovanovic"),
        )
        assert response.status_code == 200
        assert response.json()["full_name"] == "Marko Jovanovic"

    async def test_delete(self, client):
        created = (await client.post("/api/candidates/", json=_candidate_payload())).json()

        response = await client.delete(f"/api/candidates/{created['id']}")
        assert response.status_code == 204

        again = await client.delete(f"/api/candidates/{created['id']}")
        assert again.status_code == 404

    async def test_assign_and_remove_skills(self, client):
        java = await _create_skill(client, "Java")
        sql = await _create_skill(client, "SQL")
        created = (await client.post("/api/candidates/", json=_candidate_payload())).json()

        assigned = await client.post(
            f"/api/candidates/{created['id']}/skills", json={"skill_ids": [sql, java, java]}
        )
        assert assigned.status_code == 200
        assert [s["name"] for s in assigned.json()["skills"]] == ["Java", "SQL"]

        removed = await client.delete(f"/api/candidates/{created['id']}/skills/{java}")
        assert removed.status_code == 200
        assert [s["name"] for s in removed.json()["skills"]] == ["SQL"]

        again = await client.delete(f"/api/candidates/{created['id']}/skills/{java}")
        assert again.status_code == 404
        assert again.json()["error"] == "SKILL_NOT_ASSIGNED"


class TestCandidateSearchEndpoint:
    async def test_filters_sort_and_header(self, client):
        csharp = await _create_skill(client, "C#")
        java = await _create_skill(client, "Java")
        for full_name, email, born, held in [
            ("Ana Petrovic", "ana@example.com", "1997-12-01", [csharp, java]),
            ("Mirko Poledica", "mirko@example.com", "2002-05-26", [csharp]),
            ("Marko Markovic", "marko@example.com", "1995-11-02", [java]),
        ]:
            response = await client.post(
                "/api/candidates/",
                json=_candidate_payload(
                    full_name=full_name, email=email, date_of_birth=born, skill_ids=held
                ),
            )
            assert response.status_code == 201

        response = await client.get(
            "/api/candidates/",
            params={"skills": f"{csharp},{java}", "match": "all"},
        )
        assert response.headers["X-Total-Count"] == "1"
        assert [c["full_name"] for c in response.json()["items"]] == ["Ana Petrovic"]

        response = await client.get(
            "/api/candidates/",
            params={"skills": f"{csharp}", "sortBy": "dob", "dir": "desc"},
        )
        assert [c["full_name"] for c in response.json()["items"]] == [
            "Mirko Poledica",
            "Ana Petrovic",
        ]

        response = await client.get("/api/candidates/", params={"page": 2, "pageSize": 2})
        body = response.json()
        assert [c["full_name"] for c in body["items"]] == ["Mirko Poledica"]
        assert body["total"] == 3
        assert response.headers["X-Total-Count"] == "3"

    async def test_skills_without_usable_ids_is_400(self, client):
        response = await client.get("/api/candidates/", params={"skills": "abc,,"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_SKILLS"

    async def test_bad_paging_is_coerced(self, client):
        response = await client.get("/api/candidates/", params={"page": 0, "pageSize": 999})
        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 1
        assert body["page_size"] == 20
