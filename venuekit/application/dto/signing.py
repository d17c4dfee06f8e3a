"""
Signing DTOs exchanged between the signing middleware and signers.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class SignRequest:
    """
    Request material a signer needs.

    Attributes:
        method: HTTP method (e.g., "GET")
        path: URL path without query string (e.g., "/orders")
        body: Raw request body (None and b"" are equivalent)
        timestamp: Caller-supplied timestamp; empty means the signer generates one
        headers: Request headers (read-only)
    """
    method: str
    path: str
    body: Optional[bytes] = None
    timestamp: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze headers so signers cannot mutate them."""
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes (b"" when absent)."""
        return self.body or b""

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default


@dataclass(frozen=True)
class SignResult:
    """
    Authentication material produced by a signer.

    The middleware applies both maps to the outgoing request,
    overwriting same-named entries.
    """
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, str] = field(default_factory=dict)

