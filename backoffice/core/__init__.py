"""Core: configuration, constants, lifespan, exception handlers and rate limiting."""
