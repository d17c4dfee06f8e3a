"""
Infrastructure Layer - External System Adapters

Structure:
- adapters/auth/: Request signers and the httpx signing middleware
- adapters/normalizer/: Venue payload normalizers (Coinbase, Prime)
- adapters/mock/: Deterministic venue client for tests
"""
