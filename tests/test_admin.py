from linkup.core.sessions import PrincipalKind
from linkup.models import Admin, Course
from linkup.services.bootstrap_service import COURSES, bootstrap


def test_health_reports_database(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert "timestamp" in body


def test_unknown_route(client):
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


def test_bootstrap_seeds_once(engine, db):
    bootstrap(engine, db, admin_email="ops@jsjlinkup.com", admin_password="pw")
    db.commit()
    bootstrap(engine, db, admin_email="ops@jsjlinkup.com", admin_password="pw")
    db.commit()

    assert db.query(Course).count() == len(COURSES)
    assert db.query(Admin).filter_by(email="ops@jsjlinkup.com").count() == 1


def test_catalog_management(client, admin_headers, student_headers):
    response = client.post(
        "/api/v1/campuses",
        json={"campus_name": "North Campus", "location": "1 Hill Rd", "campus_size": 12.5},
        headers=admin_headers,
    )
    assert response.status_code == 201
    campus_id = response.json()["campus"]["id"]

    response = client.put(f"/api/v1/campuses/{campus_id}", json={"location": "2 Hill Rd"}, headers=admin_headers)
    assert response.json()["campus"]["location"] == "2 Hill Rd"

    faculty = client.post(
        "/api/v1/faculties", json={"faculty_name": "Faculty of Law"}, headers=admin_headers
    ).json()["faculty"]
    duplicate = client.post("/api/v1/faculties", json={"faculty_name": "Faculty of Law"}, headers=admin_headers)
    assert duplicate.status_code == 409

    course = client.post(
        "/api/v1/courses",
        json={
            "faculty_id": faculty["id"],
            "course_name": "Bachelor of Laws",
            "credits": 480,
            "number_of_modules": 32,
            "course_code": "LLB101",
        },
        headers=admin_headers,
    )
    assert course.status_code == 201
    assert course.json()["course"]["faculty_name"] == "Faculty of Law"

    courses = client.get(f"/api/v1/faculties/{faculty['id']}/courses").json()["courses"]
    assert [c["course_code"] for c in courses] == ["LLB101"]
    assert client.get("/api/v1/faculties/999/courses").status_code == 404

    module = client.post(
        "/api/v1/modules",
        json={"module_name": "Contract Law", "module_code": "LAW201", "credits": 15},
        headers=admin_headers,
    )
    assert module.status_code == 201
    assert [m["module_code"] for m in client.get("/api/v1/modules").json()["modules"]] == ["LAW201"]

    student_headers("123456789", campus_id=campus_id)
    referenced = client.delete(f"/api/v1/campuses/{campus_id}", headers=admin_headers)
    assert referenced.status_code == 409


def test_catalog_writes_require_admin(client, student_headers):
    headers = student_headers("123456789")

    response = client.post("/api/v1/campuses", json={"campus_name": "X", "location": "Y"}, headers=headers)

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid admin session"}


def test_class_enrollment(client, admin_headers, student_headers):
    headers = student_headers("123456789")
    response = client.post(
        "/api/v1/classes",
        json={
            "class_name": "Algorithms lecture",
            "class_time": "09:00:00",
            "class_date": "2030-03-04",
            "duration_minutes": 90,
            "location": "LT1",
            "instructor": "Dr Mahlangu",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    class_id = response.json()["class"]["id"]

    url = f"/api/v1/classes/{class_id}/enroll"
    enrolled = client.post(url, headers=headers)
    assert enrolled.status_code == 200
    assert enrolled.json() == {"message": "Successfully enrolled in class"}
    assert client.post(url, headers=headers).status_code == 409

    mine = client.get("/api/v1/classes/mine", headers=headers).json()["classes"]
    assert [c["id"] for c in mine] == [class_id]

    assert client.delete(url, headers=headers).json() == {"message": "Successfully unenrolled from class"}
    assert client.delete(url, headers=headers).status_code == 404
    assert client.post("/api/v1/classes/999/enroll", headers=headers).status_code == 404


def test_badges(client, admin_headers, student_headers):
    student_headers("123456789")

    response = client.post(
        "/api/v1/badges",
        json={"badge_name": "Mentor", "description": "Helped 10 peers", "student_number": "123456789"},
        headers=admin_headers,
    )
    assert response.status_code == 201

    missing = client.post(
        "/api/v1/badges", json={"badge_name": "Ghost", "student_number": "999999999"}, headers=admin_headers
    )
    assert missing.status_code == 404

    badges = client.get("/api/v1/badges/123456789").json()["badges"]
    assert [b["badge_name"] for b in badges] == ["Mentor"]


def test_notification_with_both_targets_is_invalid(client, admin_headers, student_headers):
    student_headers("123456789")

    response = client.post(
        "/api/v1/notifications",
        json={
            "name": "Timetable change",
            "target_type": "student",
            "target_student": "123456789",
            "target_admin": 1,
        },
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_notification_target_must_match_type(client, admin_headers):
    response = client.post(
        "/api/v1/notifications",
        json={"name": "Ping", "target_type": "admin", "target_student": "123456789"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_notifications_are_pulled_by_their_target(client, admin_headers, student_headers, store):
    headers = student_headers("123456789")
    other = student_headers("987654321")
    admin_id = store.resolve(admin_headers["authorization"], PrincipalKind.ADMIN)["admin_id"]

    for payload in (
        {"name": "Welcome", "target_type": "student", "target_student": "123456789"},
        {"name": "Report ready", "target_type": "admin", "target_admin": admin_id},
    ):
        assert client.post("/api/v1/notifications", json=payload, headers=admin_headers).status_code == 201

    mine = client.get("/api/v1/notifications", headers=headers).json()["notifications"]
    assert [n["name"] for n in mine] == ["Welcome"]
    assert client.get("/api/v1/notifications", headers=other).json() == {"notifications": []}

    admin_feed = client.get("/api/v1/admin/notifications", headers=admin_headers).json()["notifications"]
    assert [n["name"] for n in admin_feed] == ["Report ready"]


def test_ratings(client, admin_headers, student_headers):
    headers = student_headers("123456789", name="Thandi")

    student_rating = client.post("/api/v1/ratings", json={"rating_value": 5, "rating_description": "Great"}, headers=headers)
    admin_rating = client.post("/api/v1/admin/ratings", json={"rating_value": 4}, headers=admin_headers)
    out_of_range = client.post("/api/v1/ratings", json={"rating_value": 6}, headers=headers)

    assert student_rating.status_code == 201
    assert student_rating.json()["rating"]["rator_type"] == "student"
    assert admin_rating.json()["rating"]["rator_type"] == "admin"
    assert out_of_range.status_code == 400

    ratings = client.get("/api/v1/ratings").json()["ratings"]
    assert {r["rator_type"] for r in ratings} == {"student", "admin"}
    assert next(r for r in ratings if r["rator_type"] == "student")["student_name"] == "Thandi"


def test_dashboards_start_at_zero(client, admin_headers, student_headers):
    headers = student_headers("123456789")

    response = client.get("/api/v1/student/dashboard", headers=headers)
    assert response.status_code == 200
    assert response.json() == {
        "stats": {"links": 0, "groups": 0, "events": 0, "classes": 0, "badges": 0, "posts": 0},
        "recentPosts": [],
        "upcomingEvents": [],
    }

    stats = client.get("/api/v1/dashboard/stats", headers=admin_headers).json()["stats"]
    assert stats == {
        "students": 1,
        "courses": 0,
        "faculties": 0,
        "campuses": 0,
        "groups": 0,
        "events": 0,
        "links": 0,
        "posts": 0,
    }


def test_student_dashboard_limits_recent_posts(client, student_headers):
    headers = student_headers("123456789")
    other = student_headers("987654321")
    for index in range(7):
        client.post("/api/v1/posts", json={"title": f"post {index}"}, headers=headers)
    client.post("/api/v1/posts", json={"title": "not mine"}, headers=other)
    client.post(
        "/api/v1/events",
        json={"name": "Past", "location": "Hall", "event_datetime": "2001-01-01T10:00:00"},
        headers=headers,
    )
    client.post(
        "/api/v1/events",
        json={"name": "Future", "location": "Hall", "event_datetime": "2099-01-01T10:00:00"},
        headers=other,
    )

    body = client.get("/api/v1/student/dashboard", headers=headers).json()

    assert body["stats"]["posts"] == 7
    assert body["stats"]["events"] == 1
    assert [p["title"] for p in body["recentPosts"]] == [f"post {i}" for i in range(6, 1, -1)]
    assert [e["name"] for e in body["upcomingEvents"]] == ["Future"]
