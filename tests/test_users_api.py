"""HTTP tests for the /api/users router, wired to the in-memory fakes."""


def _create(client, name="Ann", email="ann@mail.com", age=30):
    payload = {"name": name, "email": email}
    if age is not None:
        payload["age"] = age
    return client.post("/api/users", json=payload)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_user_returns_201_with_links(client):
    res = _create(client)

    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "Ann"
    assert body["email"] == "ann@mail.com"
    assert body["age"] == 30
    assert body["created_at"]
    assert body["links"]["self"].endswith(f"/api/users/{body['id']}")
    assert body["links"]["update"].endswith(f"/api/users/update/{body['id']}")
    assert body["links"]["delete"].endswith(f"/api/users/delete/{body['id']}")
    assert body["links"]["all-users"].endswith("/api/users")


def test_create_user_notifies(client, notifier):
    body = _create(client).json()

    assert notifier.events == [("created", body["id"], "Ann", "ann@mail.com")]


def test_create_duplicate_email_is_conflict(client):
    _create(client)

    res = _create(client, name="Other")

    assert res.status_code == 409
    assert "ann@mail.com" in res.json()["error"]
    assert client.get("/api/users/count").json() == {"count": 1}


def test_create_validation_errors_are_400(client):
    cases = [
        {"name": "A", "email": "ann@mail.com"},
        {"name": "x" * 101, "email": "ann@mail.com"},
        {"name": "Ann", "email": "not-an-email"},
        {"name": "Ann", "email": "ann@mail.com", "age": -1},
        {"name": "Ann", "email": "ann@mail.com", "age": 151},
        {"email": "ann@mail.com"},
    ]
    for payload in cases:
        res = client.post("/api/users", json=payload)
        assert res.status_code == 400, payload
        assert res.json()["error"] == "Validation error"


def test_create_blank_name_rejected_by_handler(client):
    res = _create(client, name="   ")

    assert res.status_code == 400


def test_get_user(client):
    created = _create(client).json()

    res = client.get(f"/api/users/{created['id']}")

    assert res.status_code == 200
    assert res.json()["email"] == "ann@mail.com"


def test_get_missing_user_is_404(client):
    res = client.get("/api/users/999")

    assert res.status_code == 404
    assert "999" in res.json()["error"]


def test_get_non_positive_id_is_400(client):
    assert client.get("/api/users/0").status_code == 400


def test_list_users(client):
    _create(client)
    _create(client, name="Bob", email="bob@mail.com", age=None)

    res = client.get("/api/users")

    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2
    assert [user["name"] for user in body["users"]] == ["Ann", "Bob"]
    assert body["users"][1]["age"] is None
    assert "create" in body["links"]


def test_list_users_empty(client):
    body = client.get("/api/users").json()

    assert body["users"] == []
    assert body["total"] == 0


def test_search_users(client):
    _create(client, name="John Smith", email="john@mail.com")
    _create(client, name="Mary Johnson", email="mary@mail.com")
    _create(client, name="Peter", email="peter@mail.com")

    res = client.get("/api/users/search", params={"name": "JOHN"})

    assert res.status_code == 200
    assert sorted(user["name"] for user in res.json()["users"]) == [
        "John Smith",
        "Mary Johnson",
    ]


def test_count_users(client):
    _create(client)
    _create(client, name="Bob", email="bob@mail.com")

    assert client.get("/api/users/count").json() == {"count": 2}


def test_update_user_partial(client):
    created = _create(client).json()

    res = client.put(f"/api/users/update/{created['id']}", json={"age": 31})

    assert res.status_code == 200
    body = res.json()
    assert body["age"] == 31
    assert body["name"] == "Ann"
    assert body["email"] == "ann@mail.com"


def test_update_to_taken_email_is_conflict(client):
    ann = _create(client).json()
    _create(client, name="Bob", email="bob@mail.com", age=40)

    res = client.put(f"/api/users/update/{ann['id']}", json={"email": "bob@mail.com"})

    assert res.status_code == 409
    assert client.get(f"/api/users/{ann['id']}").json()["email"] == "ann@mail.com"


def test_update_missing_user_is_404(client):
    res = client.put("/api/users/update/55", json={"name": "Ghost"})

    assert res.status_code == 404


def test_update_validation_error_is_400(client):
    created = _create(client).json()

    res = client.put(f"/api/users/update/{created['id']}", json={"age": 500})

    assert res.status_code == 400


def test_delete_user(client, notifier):
    created = _create(client).json()

    res = client.delete(f"/api/users/delete/{created['id']}")

    assert res.status_code == 204
    assert res.content == b""
    assert client.get(f"/api/users/{created['id']}").status_code == 404
    assert notifier.events[-1] == ("deleted", created["id"], "Ann", "ann@mail.com")


def test_delete_missing_user_is_404(client):
    assert client.delete("/api/users/delete/8").status_code == 404


def test_persistence_failure_is_500(client, repository):
    repository.failing.add("list_all")

    res = client.get("/api/users")

    assert res.status_code == 500
    assert "list_users" in res.json()["error"]
    assert "connection refused" not in res.json()["error"]


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_metrics_endpoint_reports_operations(client):
    _create(client)

    res = client.get("/metrics")

    assert res.status_code == 200
    assert "user_operations_total" in res.text


def test_create_succeeds_when_notifier_fails(notifier, client):
    notifier.fail = True

    res = _create(client)

    assert res.status_code == 201
    assert client.get("/api/users/count").json() == {"count": 1}
