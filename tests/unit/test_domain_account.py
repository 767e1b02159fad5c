"""Unit tests for Account/Address entities and the Email value object."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from src.domain.entities.account import Account
from src.domain.entities.address import Address
from src.domain.value_objects.email import Email, normalize_email


def create_account(**overrides) -> Account:
    now = datetime.now(UTC)
    fields = {
        "id": uuid4(),
        "name": "Ann",
        "email": "ann@example.com",
        "password_hash": "$2b$04$secret-hash",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Account(**fields)


@pytest.mark.unit
class TestAccountPublicView:
    def test_to_public_excludes_secrets(self):
        account = create_account(reset_token="f" * 64)

        public = account.to_public()

        assert "password_hash" not in public
        assert "reset_token" not in public
        assert public["email"] == "ann@example.com"
        assert public["id"] == str(account.id)

    def test_repr_hides_password_hash(self):
        account = create_account()

        assert "secret-hash" not in repr(account)


@pytest.mark.unit
class TestAddressPublicView:
    def test_optional_line2_is_null(self):
        owner = uuid4()
        address = Address(
            id=uuid4(),
            account_id=owner,
            type="home",
            name="Ann",
            phone="555",
            address_line1="1 Main St",
            city="Springfield",
            state="IL",
            pincode="62701",
        )

        assert address.to_public()["address_line2"] is None


@pytest.mark.unit
class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ann@Example.COM ").value == "ann@example.com"
        assert normalize_email(" Ann@Example.COM\t") == "ann@example.com"

    def test_idna_domain_matches_unicode_domain(self):
        assert normalize_email("ann@xn--bcher-kva.com") == normalize_email(
            "ann@b\u00fccher.com"
        )
        assert Email("ann@xn--bcher-kva.com").value == normalize_email(
            "ann@xn--bcher-kva.com"
        )

    def test_decomposed_local_part_matches_composed(self):
        decomposed = "e\u0301ve@example.com"
        composed = "\u00e9ve@example.com"

        assert Email(decomposed).value == composed
        assert normalize_email(decomposed) == composed

    def test_invalid_input_is_only_trimmed_and_lowercased(self):
        assert normalize_email("  Not-An-Email ") == "not-an-email"

    @pytest.mark.parametrize("raw", ["", "ann", "ann@", "@example.com", "a b@example.com"])
    def test_rejects_invalid(self, raw):
        with pytest.raises(ValueError, match="Invalid email"):
            Email(raw)
