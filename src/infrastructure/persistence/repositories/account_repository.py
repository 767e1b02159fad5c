"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database AccountModel.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.account import AccountModel
from src.infrastructure.persistence.repositories.storage_guard import storage_guard


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Writes commit immediately. Every database failure is re-raised as
    StorageError (see storage_guard).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_email("ann@x.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, name: str, email: str, password_hash: str) -> Account:
        """Insert a new account.

        Raises:
            EmailAlreadyStoredError: If the email is already registered.
            StorageError: If the database operation fails.
        """
        account_model = AccountModel(
            name=name,
            email=email,
            password_hash=password_hash,
        )
        async with storage_guard(self.session, "create", email=email):
            self.session.add(account_model)
            await self.session.commit()
            await self.session.refresh(account_model)

        return self._to_domain(account_model)

    async def find_by_id(self, account_id: UUID) -> Account | None:
        async with storage_guard(self.session, "find_by_id"):
            account_model = await self._get_model(account_id)
        return self._to_domain(account_model) if account_model else None

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by normalized email (exact match)."""
        stmt = select(AccountModel).where(AccountModel.email == email)
        async with storage_guard(self.session, "find_by_email"):
            result = await self.session.execute(stmt)
            account_model = result.scalar_one_or_none()
        return self._to_domain(account_model) if account_model else None

    async def find_by_reset_token(self, token: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.reset_token == token)
        async with storage_guard(self.session, "find_by_reset_token"):
            result = await self.session.execute(stmt)
            account_model = result.scalar_one_or_none()
        return self._to_domain(account_model) if account_model else None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(AccountModel.id).where(AccountModel.email == email)
        async with storage_guard(self.session, "exists_by_email"):
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none() is not None

    async def set_reset_token(
        self, account_id: UUID, token: str, expires_at: datetime
    ) -> None:
        """Store a reset token, overwriting any previous one."""
        await self._write(
            "set_reset_token",
            account_id,
            reset_token=token,
            reset_token_expires_at=expires_at,
        )

    async def clear_reset_token(self, account_id: UUID) -> None:
        await self._write(
            "clear_reset_token",
            account_id,
            reset_token=None,
            reset_token_expires_at=None,
        )

    async def update_password_hash(self, account_id: UUID, password_hash: str) -> None:
        await self._write("update_password_hash", account_id, password_hash=password_hash)

    async def update_profile(
        self,
        account_id: UUID,
        *,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> Account | None:
        """Update supplied profile fields; None leaves a field unchanged.

        Raises:
            EmailAlreadyStoredError: If the new email belongs to another account.
            StorageError: If the database operation fails.
        """
        values = {
            field: value
            for field, value in (("name", name), ("email", email), ("phone", phone))
            if value is not None
        }
        async with storage_guard(self.session, "update_profile", email=email):
            account_model = await self._get_model(account_id)
            if account_model is None:
                return None
            for field, value in values.items():
                setattr(account_model, field, value)
            await self.session.commit()
            await self.session.refresh(account_model)

        return self._to_domain(account_model)

    async def update_avatar(self, account_id: UUID, avatar: str) -> Account | None:
        async with storage_guard(self.session, "update_avatar"):
            account_model = await self._get_model(account_id)
            if account_model is None:
                return None
            account_model.avatar = avatar
            await self.session.commit()
            await self.session.refresh(account_model)

        return self._to_domain(account_model)

    async def consume_reset_token(
        self, token: str, password_hash: str, now: datetime
    ) -> Account | None:
        """Swap the password hash and clear a live reset token in one statement.

        The WHERE clause matches the token and requires an unexpired
        timestamp, so when two requests race on the same token the database
        lets exactly one UPDATE hit the row.

        Returns:
            Updated Account, or None if no live token matched.
        """
        stmt = (
            update(AccountModel)
            .where(
                AccountModel.reset_token == token,
                AccountModel.reset_token_expires_at > now,
            )
            .values(
                password_hash=password_hash,
                reset_token=None,
                reset_token_expires_at=None,
                updated_at=now,
            )
            .returning(AccountModel.id)
            .execution_options(synchronize_session=False)
        )
        async with storage_guard(self.session, "consume_reset_token"):
            result = await self.session.execute(stmt)
            account_id = result.scalar_one_or_none()
            await self.session.commit()
            if account_id is None:
                return None
            account_model = await self._get_model(account_id)

        return self._to_domain(account_model) if account_model else None

    async def _get_model(self, account_id: UUID) -> AccountModel | None:
        # populate_existing refreshes rows already in the identity map after
        # bulk UPDATE statements
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _write(self, operation: str, account_id: UUID, **values: object) -> None:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(**values, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        async with storage_guard(self.session, operation):
            await self.session.execute(stmt)
            await self.session.commit()

    def _to_domain(self, account_model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=account_model.id,
            name=account_model.name,
            email=account_model.email,
            password_hash=account_model.password_hash,
            avatar=account_model.avatar,
            phone=account_model.phone,
            reset_token=account_model.reset_token,
            reset_token_expires_at=ensure_utc(account_model.reset_token_expires_at),
            created_at=ensure_utc(account_model.created_at),
            updated_at=ensure_utc(account_model.updated_at),
        )
