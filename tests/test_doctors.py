import pytest

from clinic_booking.core.config import settings


@pytest.fixture
def doctor_password(monkeypatch):
    monkeypatch.setattr(settings, "DOCTOR_PASSWORD", "clinic-secret")
    return "clinic-secret"


class TestDoctorDirectory:

    def test_list_doctors(self, client, doctors):
        response = client.get("/api/v1/doctors")
        assert response.status_code == 200

        data = response.json()
        assert [d["doctorCode"] for d in data] == ["D1", "D2"]
        assert data[0]["name"] == "Dr. Asha Menon"
        assert data[1]["specialization"] == "Pediatrics"

    def test_list_doctors_empty(self, client):
        response = client.get("/api/v1/doctors")
        assert response.status_code == 200
        assert response.json() == []


class TestDoctorLogin:

    def test_login_success(self, client, doctors, doctor_password):
        response = client.post(
            "/api/v1/doctors/login", json={"doctorCode": "D1", "password": doctor_password}
        )
        assert response.status_code == 200
        assert response.json()["doctorCode"] == "D1"

    def test_login_wrong_password(self, client, doctors, doctor_password):
        response = client.post(
            "/api/v1/doctors/login", json={"doctorCode": "D1", "password": "guess"}
        )
        assert response.status_code == 401

    def test_login_unknown_doctor(self, client, doctors, doctor_password):
        response = client.post(
            "/api/v1/doctors/login", json={"doctorCode": "D9", "password": doctor_password}
        )
        assert response.status_code == 401

    def test_login_disabled_without_configured_password(self, client, doctors, monkeypatch):
        monkeypatch.setattr(settings, "DOCTOR_PASSWORD", None)

        response = client.post(
            "/api/v1/doctors/login", json={"doctorCode": "D1", "password": "anything"}
        )
        assert response.status_code == 401

    def test_login_missing_fields(self, client):
        response = client.post("/api/v1/doctors/login", json={"doctorCode": "D1"})
        assert response.status_code == 400


class TestHealth:

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_responses_carry_process_time(self, client):
        response = client.get("/api/v1/doctors")
        assert response.status_code == 200
        assert float(response.headers["X-Process-Time"]) >= 0
