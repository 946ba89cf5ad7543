from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payments_query.domain.value_objects import UserId


@dataclass(frozen=True, slots=True)
class User:
    """A purchasing user.

    The email is matched exactly (case-sensitive) by user lookups.
    """

    id: UserId
    email: str
