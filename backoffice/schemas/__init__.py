"""API schemas (request forms and responses)."""
