"""
Mock provider catalogue.

Stands in for the Uber, Ola and Rapido estimate APIs. A real
integration would replace this with per-provider HTTP clients.
"""

from .models import ProviderEstimates, RideOffer

CURRENCY = "₹"

# Every quote is for the same sample 7.2 km trip
MOCK_CATALOGUE: tuple[ProviderEstimates, ...] = (
    ProviderEstimates(
        service="uber",
        estimates=[
            RideOffer(
                ride_type="UberX",
                capacity=4,
                fare="249",
                currency=CURRENCY,
                estimated_pickup_time=12,
                estimated_duration=18,
                distance="7.2",
                deep_link="uber://",
            ),
            RideOffer(
                ride_type="UberXL",
                capacity=6,
                fare="349",
                currency=CURRENCY,
                estimated_pickup_time=15,
                estimated_duration=18,
                distance="7.2",
                deep_link="uber://",
            ),
        ],
    ),
    ProviderEstimates(
        service="ola",
        estimates=[
            RideOffer(
                ride_type="Ola Mini",
                capacity=4,
                fare="279",
                currency=CURRENCY,
                estimated_pickup_time=8,
                estimated_duration=18,
                distance="7.2",
                deep_link="ola://",
            ),
            RideOffer(
                ride_type="Ola Prime",
                capacity=4,
                fare="369",
                currency=CURRENCY,
                estimated_pickup_time=10,
                estimated_duration=18,
                distance="7.2",
                deep_link="ola://",
            ),
        ],
    ),
    ProviderEstimates(
        service="rapido",
        estimates=[
            RideOffer(
                ride_type="Rapido Bike",
                capacity=1,
                fare="149",
                currency=CURRENCY,
                estimated_pickup_time=5,
                estimated_duration=12,
                distance="7.2",
                deep_link="rapido://",
            ),
        ],
    ),
)
