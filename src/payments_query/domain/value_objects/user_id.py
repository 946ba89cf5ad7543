from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from payments_query.domain.exceptions import InvalidUserIdError


@dataclass(frozen=True, slots=True)
class UserId:
    """Identity of a purchasing user."""

    value: UUID

    @classmethod
    def generate(cls) -> UserId:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> UserId:
        """Parse a UserId, raising InvalidUserIdError for non-UUID input."""
        try:
            return cls(value=UUID(id_str))
        except (ValueError, AttributeError, TypeError) as e:
            raise InvalidUserIdError(f"Invalid user ID: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
