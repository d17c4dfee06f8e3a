"""
Application Layer - DTOs and Ports

Structure:
- ports/outbound/: Interfaces for signers, normalizers, venue clients and clocks
- dto/: Data Transfer Objects for port communication
"""
