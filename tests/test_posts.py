import pytest

from linkup.services import post_service


@pytest.fixture
def author(student_headers):
    return student_headers("111111111", name="Alice", surname="Khumalo")


@pytest.fixture
def reader(student_headers):
    return student_headers("222222222", name="Bob", surname="Naidoo")


@pytest.fixture
def post_id(client, author):
    response = client.post("/api/v1/posts", json={"title": "Study group", "caption": "Library 7pm"}, headers=author)
    assert response.status_code == 201
    return response.json()["post"]["id"]


def _post(client, post_id):
    return client.get(f"/api/v1/posts/{post_id}").json()["post"]


def test_new_post_has_zero_counts(client, post_id):
    post = _post(client, post_id)

    assert post["like_count"] == 0
    assert post["comment_count"] == 0
    assert post["creator_name"] == "Alice"


def test_like_twice_conflicts_and_unlike_resets(client, post_id, reader):
    url = f"/api/v1/posts/{post_id}/like"

    first = client.post(url, headers=reader)
    assert first.status_code == 200
    assert first.json() == {"message": "Post liked successfully", "post_id": post_id, "like_count": 1}

    second = client.post(url, headers=reader)
    assert second.status_code == 409
    assert second.json() == {"error": "Post already liked"}
    assert _post(client, post_id)["like_count"] == 1

    unliked = client.delete(url, headers=reader)
    assert unliked.status_code == 200
    assert unliked.json()["like_count"] == 0

    assert client.delete(url, headers=reader).status_code == 404


def test_racing_like_is_settled_by_unique_constraint(client, post_id, reader, monkeypatch):
    url = f"/api/v1/posts/{post_id}/like"
    assert client.post(url, headers=reader).status_code == 200

    # The second request misses the pre-check, as if both had read before either wrote.
    monkeypatch.setattr(post_service, "_find_like", lambda session, post_id, student_number: None)
    racing = client.post(url, headers=reader)
    monkeypatch.undo()

    assert racing.status_code == 409
    assert racing.json() == {"error": "Post already liked"}
    assert _post(client, post_id)["like_count"] == 1


def test_like_missing_post_is_not_found(client, reader):
    assert client.post("/api/v1/posts/999/like", headers=reader).status_code == 404


def test_like_requires_session(client, post_id):
    assert client.post(f"/api/v1/posts/{post_id}/like").status_code == 401


def test_likes_from_different_students_accumulate(client, post_id, author, reader):
    client.post(f"/api/v1/posts/{post_id}/like", headers=author)
    response = client.post(f"/api/v1/posts/{post_id}/like", headers=reader)

    assert response.json()["like_count"] == 2
    assert client.get("/api/v1/posts").json()["posts"][0]["like_count"] == 2


def test_post_author_only_mutations(client, post_id, author, reader):
    url = f"/api/v1/posts/{post_id}"

    assert client.put(url, json={"title": "Mine now"}, headers=reader).status_code == 403
    assert client.delete(url, headers=reader).status_code == 403

    response = client.put(url, json={"caption": "Moved to 8pm"}, headers=author)
    assert response.status_code == 200
    assert response.json()["post"]["caption"] == "Moved to 8pm"
    assert response.json()["post"]["title"] == "Study group"

    client.post(f"{url}/like", headers=reader)
    client.post(f"{url}/comments", json={"content": "See you there"}, headers=reader)
    assert client.delete(url, headers=author).status_code == 200
    assert client.get(url).status_code == 404


def test_posts_listed_newest_first(client, author):
    for title in ("first", "second", "third"):
        client.post("/api/v1/posts", json={"title": title}, headers=author)

    titles = [post["title"] for post in client.get("/api/v1/posts").json()["posts"]]

    assert titles == ["third", "second", "first"]


def test_comment_lifecycle(client, post_id, author, reader):
    url = f"/api/v1/posts/{post_id}/comments"

    response = client.post(url, json={"content": "  Count me in  "}, headers=reader)
    assert response.status_code == 201
    body = response.json()
    assert body["comment"]["content"] == "Count me in"
    assert body["comment"]["author_name"] == "Bob"
    assert body["comment_count"] == 1

    client.post(url, json={"content": "Bring snacks"}, headers=author)
    comments = client.get(url).json()["comments"]
    assert [c["content"] for c in comments] == ["Count me in", "Bring snacks"]
    assert _post(client, post_id)["comment_count"] == 2

    comment_id = body["comment"]["id"]
    edited = client.put(f"{url}/{comment_id}", json={"content": "Count me in twice"}, headers=reader)
    assert edited.status_code == 200
    assert edited.json()["comment"]["content"] == "Count me in twice"

    deleted = client.delete(f"{url}/{comment_id}", headers=reader)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Comment deleted successfully", "comment_count": 1}


def test_comment_edit_and_delete_by_non_author_forbidden(client, post_id, author, reader):
    url = f"/api/v1/posts/{post_id}/comments"
    comment_id = client.post(url, json={"content": "Mine"}, headers=reader).json()["comment"]["id"]

    edit = client.put(f"{url}/{comment_id}", json={"content": "Not yours"}, headers=author)
    delete = client.delete(f"{url}/{comment_id}", headers=author)

    assert edit.status_code == 403
    assert edit.json() == {"error": "Only the comment author can edit the comment"}
    assert delete.status_code == 403
    assert delete.json() == {"error": "Only the comment author can delete the comment"}


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
def test_blank_comment_is_invalid(client, post_id, reader, content):
    response = client.post(f"/api/v1/posts/{post_id}/comments", json={"content": content}, headers=reader)

    assert response.status_code == 400
    assert response.json() == {"error": "Comment content is required"}


def test_comment_on_missing_post(client, reader):
    response = client.post("/api/v1/posts/999/comments", json={"content": "Hello"}, headers=reader)
    assert response.status_code == 404


def test_comment_under_wrong_post_is_not_found(client, author, post_id):
    other_id = client.post("/api/v1/posts", json={"title": "Other"}, headers=author).json()["post"]["id"]
    comment_id = client.post(
        f"/api/v1/posts/{post_id}/comments", json={"content": "Hi"}, headers=author
    ).json()["comment"]["id"]

    response = client.delete(f"/api/v1/posts/{other_id}/comments/{comment_id}", headers=author)

    assert response.status_code == 404
