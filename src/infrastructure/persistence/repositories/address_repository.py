"""AddressRepository - SQLAlchemy implementation of AddressRepository protocol.

Every query filters on both the address id and the owning account id, so a
row owned by someone else reads exactly like a missing row.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.address import Address
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.address import AddressModel
from src.infrastructure.persistence.repositories.storage_guard import storage_guard

_EDITABLE_FIELDS = (
    "type",
    "name",
    "phone",
    "address_line1",
    "address_line2",
    "city",
    "state",
    "pincode",
)


class AddressRepository:
    """SQLAlchemy implementation of AddressRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, address: Address) -> Address:
        address_model = self._to_model(address)
        async with storage_guard(self.session, "create_address"):
            self.session.add(address_model)
            await self.session.commit()
            await self.session.refresh(address_model)
        return self._to_domain(address_model)

    async def update_for_account(self, address: Address) -> Address | None:
        """Overwrite the editable fields of an owned address.

        Returns:
            Updated Address, or None if the row is missing or owned by
            another account.
        """
        async with storage_guard(self.session, "update_address"):
            address_model = await self._get_owned(address.id, address.account_id)
            if address_model is None:
                return None
            for field in _EDITABLE_FIELDS:
                setattr(address_model, field, getattr(address, field))
            await self.session.commit()
            await self.session.refresh(address_model)
        return self._to_domain(address_model)

    async def list_for_account(self, account_id: UUID) -> list[Address]:
        stmt = (
            select(AddressModel)
            .where(AddressModel.account_id == account_id)
            .order_by(AddressModel.created_at, AddressModel.id)
        )
        async with storage_guard(self.session, "list_addresses"):
            result = await self.session.execute(stmt)
            address_models = result.scalars().all()
        return [self._to_domain(model) for model in address_models]

    async def _get_owned(
        self, address_id: UUID, account_id: UUID
    ) -> AddressModel | None:
        stmt = select(AddressModel).where(
            AddressModel.id == address_id,
            AddressModel.account_id == account_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, address_model: AddressModel) -> Address:
        return Address(
            id=address_model.id,
            account_id=address_model.account_id,
            type=address_model.type,
            name=address_model.name,
            phone=address_model.phone,
            address_line1=address_model.address_line1,
            address_line2=address_model.address_line2,
            city=address_model.city,
            state=address_model.state,
            pincode=address_model.pincode,
            created_at=ensure_utc(address_model.created_at),
            updated_at=ensure_utc(address_model.updated_at),
        )

    def _to_model(self, address: Address) -> AddressModel:
        return AddressModel(
            id=address.id,
            account_id=address.account_id,
            type=address.type,
            name=address.name,
            phone=address.phone,
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            city=address.city,
            state=address.state,
            pincode=address.pincode,
        )
