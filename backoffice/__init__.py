"""Back-office employee authentication service."""
