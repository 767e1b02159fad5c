"""Integration tests for BcryptPasswordService (real bcrypt, cost 4)."""

import pytest

from src.domain.errors import CorruptHashError
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@pytest.fixture
def password_service():
    return BcryptPasswordService(cost_factor=4)


@pytest.mark.integration
class TestBcryptHashing:
    def test_hash_is_self_describing(self, password_service):
        password_hash = password_service.hash_password("Secret123")

        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60

    def test_same_password_gets_different_salts(self, password_service):
        first = password_service.hash_password("Secret123")
        second = password_service.hash_password("Secret123")

        assert first != second
        assert password_service.verify_password("Secret123", first)
        assert password_service.verify_password("Secret123", second)

    def test_wrong_password_returns_false(self, password_service):
        password_hash = password_service.hash_password("Secret123")

        assert password_service.verify_password("secret123", password_hash) is False

    def test_hash_from_other_cost_factor_verifies(self, password_service):
        stronger = BcryptPasswordService(cost_factor=5)

        assert password_service.verify_password(
            "Secret123", stronger.hash_password("Secret123")
        )

    def test_long_password_uses_first_72_bytes(self, password_service):
        password_hash = password_service.hash_password("p" * 100)

        assert password_service.verify_password("p" * 72, password_hash)


@pytest.mark.integration
class TestBcryptErrors:
    def test_corrupt_hash_raises(self, password_service):
        with pytest.raises(CorruptHashError):
            password_service.verify_password("Secret123", "not-a-bcrypt-hash")

    def test_dummy_verify_does_not_raise(self, password_service):
        password_service.dummy_verify("anything")

    @pytest.mark.parametrize("cost", [3, 21])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
