"""Domain value objects."""

from backoffice.domain.value_objects.core import Email

__all__ = ["Email"]
