from uuid import UUID

import pytest

from payments_query.domain.exceptions import InvalidUserIdError
from payments_query.domain.value_objects import UserId


class TestUserId:
    def test_generate_creates_unique_ids(self) -> None:
        assert UserId.generate() != UserId.generate()

    def test_from_string_parses_valid_uuid(self) -> None:
        uuid_str = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"

        assert UserId.from_string(uuid_str).value == UUID(uuid_str)

    @pytest.mark.parametrize("bad", ["", "42", "6ba7b810-9dad-11d1-80b4"])
    def test_from_string_raises_for_invalid_uuid(self, bad: str) -> None:
        with pytest.raises(InvalidUserIdError, match="Invalid user ID"):
            UserId.from_string(bad)
