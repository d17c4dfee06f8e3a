# Outbound ports (external system interfaces)
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.application.ports.outbound.normalizer_port import NormalizerPort
from venuekit.application.ports.outbound.venue_client_port import (
    VenueClientPort,
    OrderBookHandler,
    TradeHandler,
)
from venuekit.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
    SystemTimeAdapter,
    FixedTimeAdapter,
)

__all__ = [
    "SignerPort",
    "NormalizerPort",
    "VenueClientPort",
    "OrderBookHandler",
    "TradeHandler",
    "TimeProviderPort",
    "SystemTimeAdapter",
    "FixedTimeAdapter",
]
