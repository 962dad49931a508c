def test_register_login_and_profile_scenario(client, register):
    response = register("123456789", "a@x.com", name="Thandi", surname="Mokoena")
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Student registered successfully"
    assert body["student"]["student_number"] == "123456789"
    assert "password" not in body["student"]
    assert "password_hash" not in body["student"]

    response = client.post("/api/v1/login", json={"email": "a@x.com", "password": "s3cret"})
    assert response.status_code == 200
    token = response.json()["sessionId"]
    assert token.startswith("student_")
    headers = {"authorization": token}

    response = client.get("/api/v1/students/123456789", headers=headers)
    assert response.status_code == 200
    assert response.json()["student"]["email"] == "a@x.com"

    response = client.put("/api/v1/students/999999999", json={"name": "Mallory"}, headers=headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Cannot update other student profiles"}


def test_update_own_profile(client, student_headers):
    headers = student_headers("123456789")

    response = client.put(
        "/api/v1/students/123456789",
        json={"surname": "Dlamini", "year_of_study": "third year"},
        headers=headers,
    )

    assert response.status_code == 200
    student = response.json()["student"]
    assert student["surname"] == "Dlamini"
    assert student["year_of_study"] == "third year"


def test_update_profile_requires_session(client, register):
    register("123456789", "a@x.com")

    response = client.put("/api/v1/students/123456789", json={"name": "X"})

    assert response.status_code == 401
    assert response.json() == {"error": "Session ID required"}


def test_duplicate_registration_is_conflict(register):
    assert register("123456789", "a@x.com").status_code == 201

    same_email = register("111111111", "a@x.com")
    same_number = register("123456789", "b@x.com")

    assert same_email.status_code == 409
    assert same_number.status_code == 409
    assert same_email.json() == {"error": "Student number or email already exists"}


def test_registration_rejects_malformed_student_number(register):
    response = register("12345", "a@x.com")

    assert response.status_code == 400
    assert "error" in response.json()


def test_registration_with_unknown_course_is_not_found(register):
    response = register("123456789", "a@x.com", course_id=999)

    assert response.status_code == 404


def test_login_with_bad_credentials(client, register):
    register("123456789", "a@x.com")

    wrong_password = client.post("/api/v1/login", json={"email": "a@x.com", "password": "nope"})
    unknown_email = client.post("/api/v1/login", json={"email": "z@x.com", "password": "s3cret"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}


def test_logout_revokes_token(client, student_headers):
    headers = student_headers("123456789")

    response = client.post("/api/v1/logout", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Logout successful"}

    response = client.get("/api/v1/links", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid session"}


def test_logout_without_token_succeeds(client):
    response = client.post("/api/v1/logout")
    assert response.status_code == 200


def test_session_id_header_is_accepted(client, student_headers):
    token = student_headers("123456789")["authorization"]

    response = client.get("/api/v1/links", headers={"session-id": token})

    assert response.status_code == 200


def test_expired_session_is_rejected(client, clock, student_headers):
    headers = student_headers("123456789")
    assert client.get("/api/v1/links", headers=headers).status_code == 200

    clock.advance(hours=24)

    response = client.get("/api/v1/links", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid session"}


def test_tokens_do_not_cross_namespaces(client, student_headers, admin_headers):
    student = student_headers("123456789")

    response = client.get("/api/v1/dashboard/stats", headers=student)
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid admin session"}

    response = client.get("/api/v1/student/dashboard", headers=admin_headers)
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid session"}


def test_admin_login_with_wrong_password(client, admin_headers):
    response = client.post("/api/v1/admin/login", json={"email": "admin@jsjlinkup.com", "password": "wrong"})
    assert response.status_code == 401


def test_admin_delete_student_revokes_sessions(client, student_headers, admin_headers):
    student = student_headers("123456789")
    other = student_headers("987654321")
    client.post("/api/v1/links", json={"acceptor": "987654321"}, headers=student)
    post_id = client.post("/api/v1/posts", json={"title": "Hello"}, headers=student).json()["post"]["id"]
    client.post(f"/api/v1/posts/{post_id}/like", headers=other)
    client.post(f"/api/v1/posts/{post_id}/comments", json={"content": "hi"}, headers=other)

    response = client.delete("/api/v1/students/123456789", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Student deleted successfully"}

    assert client.get("/api/v1/links", headers=student).status_code == 401
    assert client.get("/api/v1/students/123456789").status_code == 404
    assert client.get("/api/v1/links", headers=other).json() == {"links": []}
    assert client.get("/api/v1/posts").json() == {"posts": []}


def test_delete_student_requires_admin(client, student_headers):
    headers = student_headers("123456789")

    response = client.delete("/api/v1/students/123456789", headers=headers)

    assert response.status_code == 401


def test_search_students(client, student_headers):
    student_headers("123456789", name="Thandi", surname="Mokoena")
    student_headers("987654321", name="Sipho", surname="Ndlovu")

    response = client.get("/api/v1/search/students", params={"query": "moko"})
    assert response.status_code == 200
    assert [s["student_number"] for s in response.json()["students"]] == ["123456789"]

    response = client.get("/api/v1/search/students", params={"query": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "Search query required"}
