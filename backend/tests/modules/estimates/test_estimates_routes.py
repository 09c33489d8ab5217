"""Tests for the ride estimates endpoint."""

import pytest

from modules.estimates.catalog import MOCK_CATALOGUE

TRIP = {
    "pickupLatitude": "12.97",
    "pickupLongitude": "77.59",
    "dropoffLatitude": "13.19",
    "dropoffLongitude": "77.70",
}


class TestRideEstimates:
    def test_no_session_needed(self, client):
        response = client.post("/api/ride-estimates", json=TRIP)

        assert response.status_code == 200

    def test_three_providers(self, client):
        data = client.post("/api/ride-estimates", json=TRIP).json()

        assert [p["service"] for p in data] == ["uber", "ola", "rapido"]
        assert all(len(p["estimates"]) >= 1 for p in data)

    def test_ride_types(self, client):
        data = client.post("/api/ride-estimates", json=TRIP).json()

        ride_types = {p["service"]: [e["rideType"] for e in p["estimates"]] for p in data}
        assert ride_types == {
            "uber": ["UberX", "UberXL"],
            "ola": ["Ola Mini", "Ola Prime"],
            "rapido": ["Rapido Bike"],
        }

    def test_offer_fields(self, client):
        data = client.post("/api/ride-estimates", json=TRIP).json()

        for provider in data:
            for offer in provider["estimates"]:
                assert offer["capacity"] >= 0
                assert offer["estimatedPickupTime"] >= 0
                assert offer["estimatedDuration"] >= 0
                assert offer["currency"]
                assert float(offer["fare"]) >= 0
                assert float(offer["distance"]) >= 0
                assert offer["deepLink"].startswith(f"{provider['service']}://")

    def test_same_answer_for_any_trip(self, client):
        first = client.post("/api/ride-estimates", json=TRIP).json()
        second = client.post(
            "/api/ride-estimates", json={**TRIP, "dropoffLatitude": "28.61"}
        ).json()

        assert first == second

    def test_catalogue_not_mutated_by_callers(self, client):
        before = [p.model_dump() for p in MOCK_CATALOGUE]

        client.post("/api/ride-estimates", json=TRIP)

        assert [p.model_dump() for p in MOCK_CATALOGUE] == before

    @pytest.mark.parametrize("missing", sorted(TRIP))
    def test_missing_coordinate(self, client, missing):
        body = {k: v for k, v in TRIP.items() if k != missing}

        response = client.post("/api/ride-estimates", json=body)

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == [missing]

    def test_empty_coordinate(self, client):
        response = client.post("/api/ride-estimates", json={**TRIP, "pickupLatitude": ""})

        assert response.status_code == 400
