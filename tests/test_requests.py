"""Request submission, listing and status updates."""


def submit(client, username="alice", product_name="Leak repair", quantity=2):
    return client.post(
        "/api/requests",
        json={"username": username, "product_name": product_name, "quantity": quantity},
    )


def test_submitted_request_starts_pending(client):
    res = submit(client)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Request submitted successfully!"
    request = body["request"]
    assert request["username"] == "alice"
    assert request["product_name"] == "Leak repair"
    assert request["quantity"] == 2
    assert request["status"] == "Pending"
    assert request["request_date"]


def test_missing_quantity_is_rejected_and_nothing_stored(client):
    res = client.post("/api/requests", json={"username": "alice", "product_name": "Leak repair"})
    assert res.status_code == 400
    assert res.json() == {"error": "Missing username, product name, or quantity"}
    assert client.get("/api/requests").json() == []


def test_zero_quantity_is_rejected(client):
    assert submit(client, quantity=0).status_code == 400
    assert client.get("/api/requests").json() == []


def test_list_all_returns_every_users_requests(client):
    submit(client, username="alice")
    submit(client, username="bob")
    res = client.get("/api/requests")
    assert res.status_code == 200
    assert sorted(r["username"] for r in res.json()) == ["alice", "bob"]


def test_list_by_username_filters(client):
    submit(client, username="alice")
    submit(client, username="alice", product_name="Windows")
    submit(client, username="bob")
    res = client.get("/api/requests/alice")
    assert res.status_code == 200
    assert [r["product_name"] for r in res.json()] == ["Leak repair", "Windows"]


def test_list_by_unknown_username_is_empty(client):
    res = client.get("/api/requests/nobody")
    assert res.status_code == 200
    assert res.json() == []


def test_patch_updates_status(client):
    request_id = submit(client).json()["request"]["id"]
    res = client.patch(f"/api/requests/{request_id}", json={"status": "Dispatched"})
    assert res.status_code == 200
    assert res.json()["message"] == "Status updated successfully!"
    assert res.json()["request"]["status"] == "Dispatched"
    assert client.get("/api/requests/alice").json()[0]["status"] == "Dispatched"


def test_patch_accepts_any_status_string(client):
    request_id = submit(client).json()["request"]["id"]
    client.patch(f"/api/requests/{request_id}", json={"status": "Dispatched"})
    res = client.patch(f"/api/requests/{request_id}", json={"status": "Pending"})
    assert res.json()["request"]["status"] == "Pending"


def test_patch_unknown_id_is_not_found_and_changes_nothing(client):
    submit(client)
    before = client.get("/api/requests").json()
    res = client.patch("/api/requests/9999", json={"status": "Dispatched"})
    assert res.status_code == 404
    assert res.json() == {"error": "Request not found"}
    assert client.get("/api/requests").json() == before


def test_patch_without_status_is_bad_request(client):
    request_id = submit(client).json()["request"]["id"]
    res = client.patch(f"/api/requests/{request_id}", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Status is required"}


def test_store_fault_on_submit_is_internal_error_without_details(client, store):
    with store.cursor() as cursor:
        cursor.execute("DROP TABLE requests")
    res = submit(client)
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


def test_patch_id_beyond_sqlite_range_is_not_found(client):
    submit(client)
    res = client.patch("/api/requests/99999999999999999999999", json={"status": "Done"})
    assert res.status_code == 404
    assert res.json() == {"error": "Request not found"}


def test_quantity_beyond_sqlite_range_is_bad_request(client):
    res = submit(client, quantity=10**30)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request body"}
    assert client.get("/api/requests").json() == []
