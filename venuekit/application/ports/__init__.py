"""Application ports (interfaces)."""
from venuekit.application.ports.outbound.signer_port import SignerPort
from venuekit.application.ports.outbound.normalizer_port import NormalizerPort
from venuekit.application.ports.outbound.venue_client_port import VenueClientPort

__all__ = [
    "SignerPort",
    "NormalizerPort",
    "VenueClientPort",
]
