"""Tests for /api/Students."""


async def test_list_students_empty(client):
    resp = await client.get("/api/Students")
    assert resp.status_code == 200
    assert resp.json() == []


async def test_create_student(client, ada):
    resp = await client.post("/api/Students", json=ada)
    assert resp.status_code == 201
    data = resp.json()
    assert isinstance(data["studentId"], int)
    assert data["firstName"] == "Ada"
    assert data["lastName"] == "Lovelace"
    assert data["email"] is None
    assert data["dateOfBirth"] == "1815-12-10"


async def test_created_ids_are_unique(client, ada):
    first = (await client.post("/api/Students", json=ada)).json()
    second = (await client.post("/api/Students", json={**ada, "firstName": "Augusta"})).json()
    assert first["studentId"] != second["studentId"]


async def test_create_ignores_identity_in_body(client, ada):
    resp = await client.post("/api/Students", json={**ada, "studentId": 999})
    assert resp.status_code == 201
    assert resp.json()["studentId"] != 999


async def test_get_student_matches_created(client, ada):
    created = (await client.post("/api/Students", json={**ada, "email": "ada@example.com"})).json()
    resp = await client.get(f"/api/Students/{created['studentId']}")
    assert resp.status_code == 200
    assert resp.json() == created


async def test_get_student_not_found(client):
    resp = await client.get("/api/Students/9999")
    assert resp.status_code == 404


async def test_create_student_missing_first_name(client, ada):
    resp = await client.post("/api/Students", json={**ada, "firstName": ""})
    assert resp.status_code == 400
    assert "firstName" in resp.json()["errors"]

    listing = await client.get("/api/Students")
    assert listing.json() == []


async def test_create_student_blank_last_name(client, ada):
    resp = await client.post("/api/Students", json={**ada, "lastName": "   "})
    assert resp.status_code == 400
    assert "lastName" in resp.json()["errors"]


async def test_create_student_missing_date_of_birth(client, ada):
    payload = {k: v for k, v in ada.items() if k != "dateOfBirth"}
    resp = await client.post("/api/Students", json=payload)
    assert resp.status_code == 400
    assert "dateOfBirth" in resp.json()["errors"]


async def test_create_student_invalid_email(client, ada):
    resp = await client.post("/api/Students", json={**ada, "email": "not-an-email"})
    assert resp.status_code == 400
    assert "email" in resp.json()["errors"]


async def test_blank_email_is_stored_as_none(client, ada):
    resp = await client.post("/api/Students", json={**ada, "email": ""})
    assert resp.status_code == 201
    assert resp.json()["email"] is None


async def test_update_student(client, ada):
    created = (await client.post("/api/Students", json=ada)).json()
    student_id = created["studentId"]

    resp = await client.put(
        f"/api/Students/{student_id}",
        json={
            "studentId": student_id,
            "firstName": "Augusta",
            "lastName": "King",
            "email": "augusta@example.com",
            "dateOfBirth": "1815-12-11",
        },
    )
    assert resp.status_code == 200

    fetched = (await client.get(f"/api/Students/{student_id}")).json()
    assert fetched == {
        "studentId": student_id,
        "firstName": "Augusta",
        "lastName": "King",
        "email": "augusta@example.com",
        "dateOfBirth": "1815-12-11",
    }


async def test_update_student_not_found(client, ada):
    resp = await client.put("/api/Students/9999", json=ada)
    assert resp.status_code == 404


async def test_update_student_invalid_leaves_row_unchanged(client, ada):
    created = (await client.post("/api/Students", json=ada)).json()
    resp = await client.put(f"/api/Students/{created['studentId']}", json={**ada, "firstName": ""})
    assert resp.status_code == 400

    fetched = (await client.get(f"/api/Students/{created['studentId']}")).json()
    assert fetched["firstName"] == "Ada"


async def test_update_student_identity_mismatch(client, ada):
    created = (await client.post("/api/Students", json=ada)).json()
    resp = await client.put(
        f"/api/Students/{created['studentId']}",
        json={**ada, "studentId": created["studentId"] + 1},
    )
    assert resp.status_code == 400
    assert "studentId" in resp.json()["errors"]


async def test_delete_student(client, ada):
    created = (await client.post("/api/Students", json=ada)).json()
    resp = await client.delete(f"/api/Students/{created['studentId']}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/Students/{created['studentId']}")
    assert resp.status_code == 404


async def test_delete_student_not_found(client):
    resp = await client.delete("/api/Students/9999")
    assert resp.status_code == 404


async def test_list_students_ordered_by_id(client, ada):
    for name in ("Charlie", "Alice", "Bob"):
        await client.post("/api/Students", json={**ada, "firstName": name})
    ids = [s["studentId"] for s in (await client.get("/api/Students")).json()]
    assert ids == sorted(ids)
    assert len(ids) == 3


async def test_malformed_json_is_rejected(client):
    resp = await client.post(
        "/api/Students",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["status"] == 400


async def test_out_of_range_student_id_is_not_found(client, ada):
    resp = await client.get("/api/Students/99999999999999999999")
    assert resp.status_code == 404

    resp = await client.put("/api/Students/99999999999999999999", json=ada)
    assert resp.status_code == 404

    resp = await client.delete("/api/Students/0")
    assert resp.status_code == 404
