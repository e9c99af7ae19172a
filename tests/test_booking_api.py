import pytest


def _doctor(client, name="Dr. Salem", services=("cleaning",)):
    r = client.post("/api/doctors", json={"name": name, "services": list(services)})
    assert r.status_code == 200
    return r.json()


def _slots(client, doctor_id, date="2024-01-01", times=("09:00", "09:30"), service="cleaning"):
    return client.post(f"/api/doctors/{doctor_id}/timeslots", json={"date": date, "times": list(times), "service": service})


def test_login_success_never_returns_password(client):
    r = client.post("/api/login", json={"email": "admin@example.com", "password": "123"})
    assert r.status_code == 200
    assert r.json() == {"id": 1, "email": "admin@example.com", "role": "admin"}


@pytest.mark.parametrize("body", [
    {"email": "admin@example.com", "password": "nope"},
    {"email": "someone@example.com", "password": "123"},
    {"email": 1, "password": "123"},
    {"email": "admin@example.com", "password": 123},
    {"email": ["admin@example.com"], "password": "123"},
    {},
    None,
])
def test_login_failure_is_401(client, body):
    r = client.post("/api/login", json=body) if body is not None else client.post("/api/login")
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid login credentials."}


def test_create_and_list_doctors(client):
    first = _doctor(client)
    assert first == {"id": 1, "name": "Dr. Salem", "services": ["cleaning"], "schedule": {}}
    second = _doctor(client, "Dr. Huda", [])
    assert second["id"] > first["id"]

    r = client.get("/api/doctors")
    assert r.status_code == 200
    assert r.json() == [
        {"id": 1, "name": "Dr. Salem", "services": ["cleaning"]},
        {"id": 2, "name": "Dr. Huda", "services": []},
    ]


@pytest.mark.parametrize("body", [{"name": "Dr. X"}, {"services": []}, {"name": "Dr. X", "services": "cleaning"}, {}])
def test_create_doctor_missing_fields(client, body):
    r = client.post("/api/doctors", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Name and services are required."}
    assert client.get("/api/doctors").json() == []


def test_malformed_json_is_400(client):
    r = client.post("/api/doctors", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body."}


def test_timeslots_are_idempotent(client):
    d = _doctor(client)
    r = _slots(client, d["id"], times=("09:00", "09:00"))
    assert r.status_code == 200
    assert r.json() == {
        "message": "Timeslots added successfully.",
        "schedule": [{"time": "09:00", "service": "cleaning", "booked": False, "patientEmail": None}],
    }
    r = _slots(client, d["id"], times=("09:00", "10:00"))
    assert [s["time"] for s in r.json()["schedule"]] == ["09:00", "10:00"]


def test_timeslot_errors(client):
    d = _doctor(client)
    r = _slots(client, 42)
    assert r.status_code == 404
    assert r.json() == {"error": "Doctor not found."}

    r = _slots(client, "abc")
    assert r.status_code == 404

    r = client.post(f"/api/doctors/{d['id']}/timeslots", json={"date": "2024-01-01", "service": "cleaning"})
    assert r.status_code == 400
    assert r.json() == {"error": "Date, times, and service are required."}

    r = _slots(client, d["id"], service="whitening")
    assert r.status_code == 400
    assert r.json() == {"error": "Service is not registered for this doctor."}
    assert client.get(f"/api/doctors/{d['id']}/available", params={"date": "2024-01-01"}).json() == []


def test_available_slots(client):
    d = _doctor(client)
    _slots(client, d["id"])
    r = client.get(f"/api/doctors/{d['id']}/available", params={"date": "2024-01-01"})
    assert r.status_code == 200
    assert [s["time"] for s in r.json()] == ["09:00", "09:30"]

    assert client.get(f"/api/doctors/{d['id']}/available", params={"date": "2030-01-01"}).json() == []

    r = client.get(f"/api/doctors/{d['id']}/available")
    assert r.status_code == 400
    assert r.json() == {"error": "Please specify a date."}

    r = client.get("/api/doctors/7/available", params={"date": "2024-01-01"})
    assert r.status_code == 404


def test_booking_flow(client):
    d = _doctor(client)
    _slots(client, d["id"])
    body = {"doctorId": d["id"], "date": "2024-01-01", "time": "09:00", "patientEmail": "patient@example.com"}

    r = client.post("/api/bookings", json=body)
    assert r.status_code == 200
    assert r.json() == {"message": "Appointment booked successfully."}

    r = client.post("/api/bookings", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "This timeslot is already booked."}

    available = client.get(f"/api/doctors/{d['id']}/available", params={"date": "2024-01-01"}).json()
    assert all(not s["booked"] for s in available)
    assert [s["time"] for s in available] == ["09:30"]

    assert client.get("/api/appointments").json() == [{
        "doctorId": 1,
        "doctorName": "Dr. Salem",
        "date": "2024-01-01",
        "time": "09:00",
        "service": "cleaning",
        "patientEmail": "patient@example.com",
    }]


@pytest.mark.parametrize("overrides,status,error", [
    ({"doctorId": 99}, 404, "Doctor not found."),
    ({"doctorId": "x1"}, 404, "Doctor not found."),
    ({"date": "2024-05-05"}, 400, "No available times on this date."),
    ({"time": "13:00"}, 404, "This timeslot does not exist."),
])
def test_booking_errors(client, overrides, status, error):
    d = _doctor(client)
    _slots(client, d["id"])
    body = {"doctorId": str(d["id"]), "date": "2024-01-01", "time": "09:00", "patientEmail": "p@example.com"}
    body.update(overrides)
    r = client.post("/api/bookings", json=body)
    assert r.status_code == status
    assert r.json() == {"error": error}
    assert client.get("/api/appointments").json() == []


@pytest.mark.parametrize("method,path", [
    ("get", "/api/unknown"),
    ("post", "/api/unknown/deeper"),
    ("delete", "/api/doctors"),
    ("put", "/api/bookings"),
    ("get", "/api/doctors/1/timeslots"),
    ("TRACE", "/api/unknown"),
    ("PROPFIND", "/api/doctors"),
])
def test_unknown_api_paths_are_404(client, method, path):
    r = client.request(method.upper(), path)
    assert r.status_code == 404
    assert r.json() == {"error": "Path not found."}


def test_root_redirects_to_login_page(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/login.html"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_frontend_is_served_when_present(tmp_path):
    from fastapi.testclient import TestClient
    from clinicdesk.main import create_app

    (tmp_path / "login.html").write_text("<h1>login</h1>")
    c = TestClient(create_app(static_dir=str(tmp_path)))
    assert c.get("/login.html").text == "<h1>login</h1>"
    assert c.get("/api/nothing").json() == {"error": "Path not found."}


def test_unexpected_errors_become_json_500(tmp_path):
    from fastapi.testclient import TestClient
    from clinicdesk.main import create_app

    app = create_app(static_dir=str(tmp_path / "missing"))

    def broken():
        raise RuntimeError("store exploded")

    app.add_api_route("/broken", broken)
    r = TestClient(app, raise_server_exceptions=False).get("/broken")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}


def test_timeslot_times_must_all_be_strings(client):
    d = _doctor(client)
    r = client.post(f"/api/doctors/{d['id']}/timeslots", json={"date": "2024-01-01", "times": ["09:00", 930], "service": "cleaning"})
    assert r.status_code == 400
    assert r.json() == {"error": "Date, times, and service are required."}
    assert client.get(f"/api/doctors/{d['id']}/available", params={"date": "2024-01-01"}).json() == []
