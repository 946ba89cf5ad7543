"""Payment source reading a JSON document from disk.

Document layout::

    {
      "users": [{"id": "<uuid>", "email": "jan@example.com"}],
      "payments": [
        {
          "id": "<uuid>",
          "payment_date": "2024-03-15T10:00:00+01:00",
          "user_id": "<uuid>",
          "items": [{"name": "A", "regular_price": "10.00", "final_price": "8.00"}]
        }
      ]
    }

Amounts may be strings or JSON numbers; numbers are read as Decimal, never
as float. Timestamps must carry a UTC offset.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, Field, ValidationError

from payments_query.application.ports import PaymentSource
from payments_query.domain.entities import Payment, PaymentItem, User
from payments_query.domain.exceptions import DomainValidationError
from payments_query.domain.value_objects import PaymentId, UserId

if TYPE_CHECKING:
    from os import PathLike

logger = logging.getLogger(__name__)

_MODEL_CONFIG = {"frozen": True, "extra": "forbid"}


class PaymentDataError(ValueError):
    """Raised when a payment data file is not valid JSON or violates the schema."""


class UserRecord(BaseModel):
    id: UUID
    email: str = Field(..., min_length=1)

    model_config = _MODEL_CONFIG


class PaymentItemRecord(BaseModel):
    name: str
    regular_price: Decimal
    final_price: Decimal

    model_config = _MODEL_CONFIG


class PaymentRecord(BaseModel):
    id: UUID
    payment_date: AwareDatetime
    user_id: UUID
    items: list[PaymentItemRecord] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class PaymentDocument(BaseModel):
    """Top-level shape of a payment data file."""

    users: list[UserRecord] = Field(default_factory=list)
    payments: list[PaymentRecord] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class JsonFilePaymentSource(PaymentSource):
    """Loads every payment from a JSON file on each fetch_all().

    Implementation notes:
    - The file is re-read on every call; nothing is cached
    - Payments of the same user share a single User instance
    - OSError from reading the file propagates unchanged
    - Malformed content raises PaymentDataError
    """

    def __init__(self, path: str | PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def fetch_all(self) -> list[Payment]:
        raw = self._path.read_bytes()
        payments = parse_payment_document(raw, origin=str(self._path))
        logger.debug("payments loaded", extra={"path": str(self._path), "count": len(payments)})
        return payments


def parse_payment_document(raw: str | bytes, origin: str = "<string>") -> list[Payment]:
    """Parse a JSON payment document into domain entities.

    Raises:
        PaymentDataError: If the bytes are not UTF-8, the text is not JSON,
            it does not match the schema, it references an unknown user, or
            it holds values the domain rejects.
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        document = PaymentDocument.model_validate(json.loads(raw, parse_float=Decimal))
    except json.JSONDecodeError as e:
        raise PaymentDataError(f"{origin}: invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise PaymentDataError(f"{origin}: invalid UTF-8: {e}") from e
    except ValidationError as e:
        raise PaymentDataError(f"{origin}: invalid payment document: {e}") from e

    users: dict[UUID, User] = {}
    for record in document.users:
        if record.id in users:
            raise PaymentDataError(f"{origin}: duplicate user id {record.id}")
        users[record.id] = User(id=UserId(value=record.id), email=record.email)

    payments = []
    for record in document.payments:
        user = users.get(record.user_id)
        if user is None:
            raise PaymentDataError(
                f"{origin}: payment {record.id} references unknown user {record.user_id}"
            )
        try:
            payments.append(_to_payment(record, user))
        except DomainValidationError as e:
            raise PaymentDataError(f"{origin}: payment {record.id}: {e}") from e
    return payments


def _to_payment(record: PaymentRecord, user: User) -> Payment:
    return Payment(
        id=PaymentId(value=record.id),
        payment_date=record.payment_date,
        user=user,
        payment_items=tuple(
            PaymentItem(
                name=item.name,
                regular_price=item.regular_price,
                final_price=item.final_price,
            )
            for item in record.items
        ),
    )
