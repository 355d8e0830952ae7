def test_create_and_list(client):
    r = client.post("/teachers", json={"name": "Ada", "employee_id": "E-1"})
    assert r.status_code == 201
    assert r.json()["employee_id"] == "E-1"

    r = client.get("/teachers")
    assert [t["name"] for t in r.json()] == ["Ada"]


def test_duplicate_employee_id(client):
    client.post("/teachers", json={"name": "Ada", "employee_id": "E-1"})
    r = client.post("/teachers", json={"name": "Grace", "employee_id": "E-1"})
    assert r.status_code == 400
    assert r.json()["detail"] == "This Employee ID is already in use. Please use a different one."


def test_blank_name_rejected(client):
    r = client.post("/teachers", json={"name": "", "employee_id": "E-2"})
    assert r.status_code == 422
