"""
API tests for the vehicle endpoints, run against the in-memory repository.
"""

import uuid
from datetime import date, timedelta

from domain.value_objects import VehicleStatus


def _rent(client, vehicle_id, customer_id):
    return client.post("/api/vehicle/rent", json={"vehicleId": str(vehicle_id), "customerId": customer_id})


def _return(client, vehicle_id, customer_id):
    return client.post("/api/vehicle/return", json={"vehicleId": str(vehicle_id), "customerId": customer_id})


class TestAvailable:
    def test_lists_only_available_vehicles(self, client, seed):
        available = seed()
        seed(renter="cust1")
        seed(status=VehicleStatus.MAINTENANCE)

        response = client.get("/api/vehicle/available")

        assert response.status_code == 200
        body = response.json()
        assert [v["id"] for v in body] == [str(available.id)]
        assert body[0]["status"] == "Available"
        assert body[0]["licensePlate"] == available.license_plate.value
        assert body[0]["currentCustomerId"] is None

    def test_empty_fleet(self, client):
        response = client.get("/api/vehicle/available")
        assert response.status_code == 200
        assert response.json() == []


class TestRent:
    def test_rent_returns_rented_vehicle(self, client, seed):
        vehicle = seed()

        response = _rent(client, vehicle.id, "cust1")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "Rented"
        assert body["currentCustomerId"] == "cust1"
        assert body["rentedAt"] is not None

    def test_unknown_vehicle_is_404(self, client):
        response = _rent(client, uuid.uuid4(), "cust1")

        assert response.status_code == 404
        assert response.json()["detail"] == {"message": "Vehicle not found", "reason": "VEHICLE_NOT_FOUND"}

    def test_rented_vehicle_is_409(self, client, seed):
        vehicle = seed(renter="cust1")

        response = _rent(client, vehicle.id, "cust2")

        assert response.status_code == 409
        assert response.json()["detail"]["reason"] == "VEHICLE_NOT_AVAILABLE"

    def test_second_rental_for_customer_is_409(self, client, seed):
        seed(renter="cust1")
        other = seed()

        response = _rent(client, other.id, "cust1")

        assert response.status_code == 409
        assert response.json()["detail"]["reason"] == "CUSTOMER_HAS_ACTIVE_RENTAL"

    def test_malformed_vehicle_id_is_400(self, client):
        response = _rent(client, "not-a-uuid", "cust1")

        assert response.status_code == 400
        assert response.json()["detail"] == {"message": "Invalid vehicle ID format", "reason": "INVALID_INPUT"}

    def test_blank_customer_is_400(self, client, seed):
        response = _rent(client, seed().id, "  ")
        assert response.status_code == 400
        assert response.json()["detail"]["reason"] == "INVALID_INPUT"

    def test_missing_field_is_400(self, client, seed):
        response = client.post("/api/vehicle/rent", json={"vehicleId": str(seed().id)})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["reason"] == "INVALID_INPUT"
        assert detail["errors"]


class TestReturn:
    def test_renter_returns_vehicle(self, client, seed):
        vehicle = seed(renter="cust1")

        response = _return(client, vehicle.id, "cust1")

        assert response.status_code == 200
        assert response.json()["status"] == "Available"
        assert response.json()["currentCustomerId"] is None

    def test_wrong_customer_is_409(self, client, seed):
        vehicle = seed(renter="cust1")

        response = _return(client, vehicle.id, "cust2")

        assert response.status_code == 409
        assert response.json()["detail"]["reason"] == "NOT_RENTED_BY_CUSTOMER"

    def test_unknown_vehicle_is_404(self, client):
        assert _return(client, uuid.uuid4(), "cust1").status_code == 404


class TestCustomerRental:
    def test_returns_current_rental(self, client, seed):
        vehicle = seed(renter="cust1")

        response = client.get("/api/vehicle/customer/cust1/rental")

        assert response.status_code == 200
        assert response.json()["id"] == str(vehicle.id)

    def test_no_rental_is_404(self, client):
        response = client.get("/api/vehicle/customer/cust1/rental")

        assert response.status_code == 404
        assert response.json()["detail"]["reason"] == "NO_ACTIVE_RENTAL"

    def test_blank_customer_is_400(self, client):
        assert client.get("/api/vehicle/customer/%20/rental").status_code == 400


class TestFleetAdministration:
    def test_register_vehicle(self, client):
        payload = {
            "licensePlate": "new123",
            "manufacturingDate": date.today().isoformat(),
            "model": "Civic",
            "brand": "Honda",
        }

        response = client.post("/api/vehicle", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body["licensePlate"] == "NEW123"
        assert body["manufacturingDate"] == payload["manufacturingDate"]
        assert body["status"] == "Available"

        fetched = client.get(f"/api/vehicle/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["model"] == "Civic"

    def test_register_duplicate_plate_is_409(self, client, seed):
        existing = seed()
        payload = {
            "licensePlate": existing.license_plate.value,
            "manufacturingDate": date.today().isoformat(),
            "model": "Civic",
            "brand": "Honda",
        }

        response = client.post("/api/vehicle", json=payload)

        assert response.status_code == 409
        assert response.json()["detail"]["reason"] == "DUPLICATE_LICENSE_PLATE"

    def test_register_too_old_is_400(self, client):
        payload = {
            "licensePlate": "OLD123",
            "manufacturingDate": (date.today() - timedelta(days=6 * 366)).isoformat(),
            "model": "Civic",
            "brand": "Honda",
        }
        assert client.post("/api/vehicle", json=payload).status_code == 400

    def test_get_unknown_vehicle_is_404(self, client):
        assert client.get(f"/api/vehicle/{uuid.uuid4()}").status_code == 404

    def test_get_malformed_id_is_400(self, client):
        assert client.get("/api/vehicle/12345").status_code == 400

    def test_status_override_ends_rental(self, client, seed):
        vehicle = seed(renter="cust1")

        response = client.put(f"/api/vehicle/{vehicle.id}/status", json={"status": "Maintenance"})

        assert response.status_code == 200
        assert response.json()["status"] == "Maintenance"
        assert response.json()["currentCustomerId"] is None
        assert client.get("/api/vehicle/customer/cust1/rental").status_code == 404

    def test_status_rented_is_400(self, client, seed):
        vehicle = seed()
        response = client.put(f"/api/vehicle/{vehicle.id}/status", json={"status": "Rented"})
        assert response.status_code == 400

    def test_unknown_status_is_400(self, client, seed):
        vehicle = seed()
        response = client.put(f"/api/vehicle/{vehicle.id}/status", json={"status": "Sold"})
        assert response.status_code == 400


def test_rental_round_trip(client, seed):
    vehicle = seed()

    assert _rent(client, vehicle.id, "cust1").status_code == 200
    assert _rent(client, vehicle.id, "cust2").status_code == 409
    assert _return(client, vehicle.id, "cust2").status_code == 409
    assert _return(client, vehicle.id, "cust1").status_code == 200
    assert [v["id"] for v in client.get("/api/vehicle/available").json()] == [str(vehicle.id)]


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-ID" in response.headers


def test_inconsistent_stored_vehicle_is_a_server_error(client, repository, seed):
    vehicle = seed()
    repository.documents[str(vehicle.id)].customer_id = "ghost"

    response = client.get("/api/vehicle/available")

    assert response.status_code == 500
    assert "inconsistent" in response.json()["detail"]
