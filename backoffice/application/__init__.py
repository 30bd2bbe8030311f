"""Application layer: DTOs, ports and query handlers."""
