"""Mock adapters."""
from venuekit.infrastructure.adapters.mock.mock_venue_client import MockVenueClient

__all__ = ["MockVenueClient"]
