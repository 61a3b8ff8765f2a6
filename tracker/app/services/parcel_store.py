"""
Parcel store.

Data-access layer over the parcel table. Each operation is one statement
against the supplied session; nothing is cached or retried here.
"""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.app.core.exceptions import StorageError
from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelBase, ParcelRead

# Row order used for every read
PARCEL_COLUMNS = (
    Parcel.number,
    Parcel.client,
    Parcel.status,
    Parcel.address,
    Parcel.created_at,
)


class ParcelStore:
    """
    CRUD operations for parcels over an open AsyncSession.

    Conditional writes (set_address, delete) that match no row are not
    errors: success does not mean a row changed.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: ParcelBase) -> int:
        """
        Insert a parcel and return its assigned number.

        Any number carried by the input is ignored.

        Raises:
            StorageError: If the insert or key retrieval fails
        """
        stmt = insert(Parcel.__table__).values(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            result = await self.db.execute(stmt)
            number = result.inserted_primary_key[0]
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise StorageError(f"add: insert failed: {exc}") from exc

        if number is None:
            raise StorageError("add: database returned no primary key")

        return int(number)

    async def get(self, number: int) -> ParcelRead:
        """
        Fetch one parcel by number.

        Raises:
            NoResultFound: If no parcel has this number
            StorageError: On any other read failure
        """
        try:
            result = await self.db.execute(
                select(*PARCEL_COLUMNS).where(Parcel.number == number)
            )
            row = result.one()
        except NoResultFound:
            raise
        except SQLAlchemyError as exc:
            raise StorageError(
                f"get: read failed for parcel {number}: {exc}",
                details={"number": number},
            ) from exc

        return ParcelRead.model_validate(row)

    async def get_by_client(self, client: int) -> List[ParcelRead]:
        """
        Fetch every parcel owned by a client, in no guaranteed order.

        Returns an empty list when the client has no parcels.
        """
        try:
            result = await self.db.execute(
                select(*PARCEL_COLUMNS).where(Parcel.client == client)
            )
            rows = result.all()
        except SQLAlchemyError as exc:
            raise StorageError(
                f"get_by_client: no data with client id {client}: {exc}",
                details={"client": client},
            ) from exc

        return [ParcelRead.model_validate(row) for row in rows]

    async def set_status(self, number: int, status: str) -> None:
        """Set the status of a parcel, whatever its current status."""
        stmt = update(Parcel).where(Parcel.number == number).values(status=status)
        await self._execute_write("set_status", stmt, number)

    async def set_address(self, number: int, address: str) -> None:
        """Change the address of a parcel that is still registered."""
        stmt = update(Parcel).where(
            Parcel.number == number,
            Parcel.status == ParcelStatus.REGISTERED.value
        ).values(address=address)
        await self._execute_write("set_address", stmt, number)

    async def delete(self, number: int) -> None:
        """Delete a parcel that is still registered."""
        stmt = delete(Parcel).where(
            Parcel.number == number,
            Parcel.status == ParcelStatus.REGISTERED.value
        )
        await self._execute_write("delete", stmt, number)

    async def _execute_write(self, operation: str, stmt, number: int) -> None:
        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise StorageError(
                f"{operation}: write failed for parcel {number}: {exc}",
                details={"number": number},
            ) from exc
