"""Profile service: profile fields, avatar reference, addresses.

Every operation takes the account id produced by identity resolution and
touches only that account's rows. An address that belongs to another
account is reported exactly like a missing one (ADDRESS_NOT_FOUND), so
callers learn nothing about other accounts.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.profile_commands import (
    SaveAddress,
    UpdateAvatar,
    UpdateProfile,
)
from src.application.services.service_guard import (
    duplicate_email,
    guard_operation,
    invalid_email,
    is_blank,
    missing_fields,
)
from src.core.constants import ADDRESS_TYPES
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.entities.address import Address
from src.domain.errors import EmailAlreadyStoredError
from src.domain.protocols import AccountRepository, AddressRepository, LoggerProtocol
from src.domain.value_objects.email import Email


def _account_not_found(account_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message="Account not found",
        resource_type="Account",
        resource_id=str(account_id),
    )


def _address_not_found(address_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ADDRESS_NOT_FOUND,
        message="Address not found",
        resource_type="Address",
        resource_id=str(address_id),
    )


def _strip(value: str | None) -> str | None:
    return value.strip() if value is not None else None


class ProfileService:
    """Account-scoped profile and address operations.

    Dependencies (injected via constructor):
        - AccountRepository: Credential store (profile columns)
        - AddressRepository: Address store
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        address_repo: AddressRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._address_repo = address_repo
        self._logger = logger

    async def get_profile(self, account_id: UUID) -> Result[Account, DomainError]:
        """Load the authenticated account (ACCOUNT_NOT_FOUND if it vanished)."""
        return await guard_operation(
            "get_profile", self._get_profile(account_id), self._logger
        )

    async def _get_profile(self, account_id: UUID) -> Result[Account, DomainError]:
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            return Failure(error=_account_not_found(account_id))
        return Success(value=account)

    async def update_profile(self, cmd: UpdateProfile) -> Result[Account, DomainError]:
        """Change any of name, email, phone.

        Returns:
            Success(Account). Failure codes: MISSING_FIELDS (nothing
            supplied), VALIDATION_FAILED (blank name), INVALID_EMAIL,
            EMAIL_ALREADY_EXISTS, ACCOUNT_NOT_FOUND, STORAGE_FAILED.
        """
        return await guard_operation(
            "update_profile", self._update_profile(cmd), self._logger
        )

    async def _update_profile(self, cmd: UpdateProfile) -> Result[Account, DomainError]:
        if cmd.name is None and cmd.email is None and cmd.phone is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.MISSING_FIELDS,
                    message="At least one field is required (name, email, phone)",
                    fields=("name", "email", "phone"),
                )
            )

        if cmd.name is not None and is_blank(cmd.name):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Name cannot be empty",
                    field="name",
                )
            )

        email: str | None = None
        if cmd.email is not None:
            try:
                email = Email(cmd.email).value
            except ValueError:
                return Failure(error=invalid_email())

        current = await self._account_repo.find_by_id(cmd.account_id)
        if current is None:
            return Failure(error=_account_not_found(cmd.account_id))

        if email is not None and email != current.email:
            if await self._account_repo.exists_by_email(email):
                return Failure(error=duplicate_email())

        try:
            account = await self._account_repo.update_profile(
                cmd.account_id,
                name=_strip(cmd.name),
                email=email,
                phone=_strip(cmd.phone),
            )
        except EmailAlreadyStoredError:
            return Failure(error=duplicate_email())

        if account is None:
            return Failure(error=_account_not_found(cmd.account_id))

        self._logger.info("profile_updated", account_id=str(account.id))
        return Success(value=account)

    async def update_avatar(self, cmd: UpdateAvatar) -> Result[Account, DomainError]:
        """Store an avatar reference string (MISSING_FIELDS if blank)."""
        return await guard_operation(
            "update_avatar", self._update_avatar(cmd), self._logger
        )

    async def _update_avatar(self, cmd: UpdateAvatar) -> Result[Account, DomainError]:
        missing = missing_fields(avatar=cmd.avatar)
        if missing is not None:
            return Failure(error=missing)

        account = await self._account_repo.update_avatar(
            cmd.account_id, cmd.avatar.strip()
        )
        if account is None:
            return Failure(error=_account_not_found(cmd.account_id))

        self._logger.info("avatar_updated", account_id=str(account.id))
        return Success(value=account)

    async def save_address(self, cmd: SaveAddress) -> Result[Address, DomainError]:
        """Create (no address_id) or update an owned address.

        Returns:
            Success(Address). Failure codes: MISSING_FIELDS,
            VALIDATION_FAILED (unknown type), ADDRESS_NOT_FOUND (missing or
            owned by another account), STORAGE_FAILED.
        """
        return await guard_operation(
            "save_address", self._save_address(cmd), self._logger
        )

    async def _save_address(self, cmd: SaveAddress) -> Result[Address, DomainError]:
        missing = missing_fields(
            type=cmd.type,
            name=cmd.name,
            phone=cmd.phone,
            address_line1=cmd.address_line1,
            city=cmd.city,
            state=cmd.state,
            pincode=cmd.pincode,
        )
        if missing is not None:
            return Failure(error=missing)

        address_type = cmd.type.strip().lower()
        if address_type not in ADDRESS_TYPES:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"Address type must be one of: {', '.join(sorted(ADDRESS_TYPES))}",
                    field="type",
                )
            )

        address = Address(
            id=cmd.address_id or uuid7(),
            account_id=cmd.account_id,
            type=address_type,
            name=cmd.name.strip(),
            phone=cmd.phone.strip(),
            address_line1=cmd.address_line1.strip(),
            address_line2=_strip(cmd.address_line2) or None,
            city=cmd.city.strip(),
            state=cmd.state.strip(),
            pincode=cmd.pincode.strip(),
        )

        if cmd.address_id is None:
            saved = await self._address_repo.create(address)
            self._logger.info(
                "address_created",
                account_id=str(cmd.account_id),
                address_id=str(saved.id),
            )
            return Success(value=saved)

        updated = await self._address_repo.update_for_account(address)
        if updated is None:
            self._logger.warning(
                "address_not_found",
                account_id=str(cmd.account_id),
                address_id=str(cmd.address_id),
            )
            return Failure(error=_address_not_found(cmd.address_id))

        self._logger.info(
            "address_updated",
            account_id=str(cmd.account_id),
            address_id=str(updated.id),
        )
        return Success(value=updated)

    async def list_addresses(
        self, account_id: UUID
    ) -> Result[list[Address], DomainError]:
        return await guard_operation(
            "list_addresses",
            self._list_addresses(account_id),
            self._logger,
        )

    async def _list_addresses(
        self, account_id: UUID
    ) -> Result[list[Address], DomainError]:
        return Success(value=await self._address_repo.list_for_account(account_id))
