"""Tests for the ride history service."""

import pytest
from datetime import datetime, timezone

from modules.rides.exceptions import RideAccessDeniedError, RideNotFoundError
from modules.rides.models import CreateRideRequest, RideStatus
from modules.rides.service import RidesService
from modules.storage.memory import MemoryStorage
from shared.models import CallerIdentity

from tests.conftest import ride_payload

ALICE = CallerIdentity(user_id=1, session_id="s1")
BOB = CallerIdentity(user_id=2, session_id="s2")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def service(storage) -> RidesService:
    return RidesService(storage)


def ride_request(**overrides) -> CreateRideRequest:
    return CreateRideRequest.model_validate(ride_payload(**overrides))


class TestRideRequest:
    def test_status_defaults_to_booked(self):
        payload = ride_payload()
        del payload["status"]

        request = CreateRideRequest.model_validate(payload)

        assert request.status == RideStatus.BOOKED.value

    def test_optional_fields(self):
        payload = ride_payload()
        del payload["paymentMethod"]

        request = CreateRideRequest.model_validate(payload)

        assert request.payment_method is None
        assert request.driver_details is None


class TestRidesService:
    @pytest.mark.asyncio
    async def test_record_ride(self, service):
        before = datetime.now(timezone.utc)

        ride = await service.record_ride(ALICE, ride_request())

        assert ride.user_id == ALICE.user_id
        assert ride.service == "uber"
        assert ride.status == "booked"
        assert ride.timestamp >= before

    @pytest.mark.asyncio
    async def test_list_rides_newest_first(self, service):
        first = await service.record_ride(ALICE, ride_request(rideType="UberX"))
        second = await service.record_ride(ALICE, ride_request(rideType="UberXL"))
        await service.record_ride(BOB, ride_request())

        rides = await service.list_rides(ALICE)

        assert [r.id for r in rides] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_get_own_ride(self, service):
        ride = await service.record_ride(ALICE, ride_request())

        assert (await service.get_ride(ALICE, ride.id)).id == ride.id

    @pytest.mark.asyncio
    async def test_get_missing_ride(self, service):
        with pytest.raises(RideNotFoundError):
            await service.get_ride(ALICE, 7)

    @pytest.mark.asyncio
    async def test_get_other_users_ride(self, service):
        ride = await service.record_ride(ALICE, ride_request())

        with pytest.raises(RideAccessDeniedError):
            await service.get_ride(BOB, ride.id)
