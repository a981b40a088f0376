"""Base classes for pydantic-based domain models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and configuration models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        # Common identifiers are 'name' or 'command_type'
        for attr in ("name", "command_type"):
            if attr in type(self).model_fields:
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"


class ValueObject(DomainModel):
    """Base class for value objects.

    Value objects are immutable and compared by their values,
    not their identities.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        """Convert this value object to a dictionary."""
        return self.model_dump()
