"""
Parcel workflow service.

Registers parcels and moves them through their status flow on top of
ParcelStore, reporting failed preconditions the store stays silent about.
"""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import NoResultFound

from tracker.app.core.exceptions import InvalidStatusTransitionError, ParcelNotFoundError
from tracker.app.models.parcel_enums import NEXT_STATUS, ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelRead
from tracker.app.services.parcel_store import ParcelStore

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelService:

    def __init__(self, store: ParcelStore):
        self.store = store

    async def register(self, client: int, address: str) -> ParcelRead:
        """Create a registered parcel for a client and return it as stored."""
        parcel = ParcelCreate(
            client=client,
            status=ParcelStatus.REGISTERED.value,
            address=address,
            created_at=utc_timestamp(),
        )
        number = await self.store.add(parcel)
        logger.info("Parcel registered", extra={"number": number, "client": client})
        return ParcelRead(number=number, **parcel.model_dump())

    async def client_parcels(self, client: int) -> List[ParcelRead]:
        return await self.store.get_by_client(client)

    async def next_status(self, number: int) -> ParcelStatus:
        """
        Advance a parcel one step along REGISTERED → SENT → DELIVERED.

        Raises:
            ParcelNotFoundError: If the parcel does not exist
            InvalidStatusTransitionError: If the parcel is delivered or in an unknown status
        """
        parcel = await self._load(number)
        try:
            new_status = NEXT_STATUS[ParcelStatus(parcel.status)]
        except (ValueError, KeyError):
            raise InvalidStatusTransitionError(number, parcel.status, "advance")

        await self.store.set_status(number, new_status.value)
        logger.info(
            "Parcel status changed",
            extra={"number": number, "from_status": parcel.status, "to_status": new_status.value},
        )
        return new_status

    async def change_address(self, number: int, address: str) -> None:
        """Change the address of a registered parcel."""
        await self._require_registered(number, "change address of")
        await self.store.set_address(number, address)

    async def delete(self, number: int) -> None:
        """Delete a registered parcel."""
        await self._require_registered(number, "delete")
        await self.store.delete(number)
        logger.info("Parcel deleted", extra={"number": number})

    async def _load(self, number: int) -> ParcelRead:
        try:
            return await self.store.get(number)
        except NoResultFound:
            raise ParcelNotFoundError(number)

    async def _require_registered(self, number: int, action: str) -> ParcelRead:
        parcel = await self._load(number)
        if parcel.status != ParcelStatus.REGISTERED.value:
            raise InvalidStatusTransitionError(number, parcel.status, action)
        return parcel
