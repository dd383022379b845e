"""SQL database store implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from sqlalchemy import delete, select

from ..domain.models import Destination, User, UserRole
from .tables import DestinationRow, UserRow, user_destinations

if TYPE_CHECKING:
    from ..db import Database


def _row_to_destination(row: DestinationRow) -> Destination:
    return Destination(
        id=row.id,
        name=row.name,
        url=row.url,
        description=row.description or "",
        created_at=row.created_at,
    )


def _row_to_user(row: UserRow) -> User:
    return User(
        id=row.id,
        name=row.name,
        email=row.email,
        role=UserRole(row.role),
        accessible_destination_ids=frozenset(d.id for d in row.destinations),
        password_hash=row.password_hash,
    )


class SqlDestinationStore:
    """DestinationStore backed by a SQL database."""

    def __init__(self, database: Database) -> None:
        self._db = database

    async def get(self, destination_id: str) -> Optional[Destination]:
        async with self._db.session() as session:
            row = await session.get(DestinationRow, destination_id)
            return _row_to_destination(row) if row else None

    async def list_all(self) -> Sequence[Destination]:
        async with self._db.session() as session:
            result = await session.scalars(select(DestinationRow).order_by(DestinationRow.created_at))
            return [_row_to_destination(r) for r in result]

    async def list_by_ids(self, destination_ids: frozenset[str]) -> Sequence[Destination]:
        if not destination_ids:
            return []
        async with self._db.session() as session:
            result = await session.scalars(
                select(DestinationRow)
                .where(DestinationRow.id.in_(destination_ids))
                .order_by(DestinationRow.created_at)
            )
            return [_row_to_destination(r) for r in result]

    async def create(self, destination: Destination) -> Destination:
        async with self._db.session() as session:
            row = DestinationRow(
                id=destination.id,
                name=destination.name,
                url=destination.url,
                description=destination.description,
                created_at=destination.created_at,
            )
            session.add(row)
            await session.commit()
            return _row_to_destination(row)

    async def update(self, destination: Destination) -> Optional[Destination]:
        async with self._db.session() as session:
            row = await session.get(DestinationRow, destination.id)
            if row is None:
                return None
            row.name = destination.name
            row.url = destination.url
            row.description = destination.description
            await session.commit()
            return _row_to_destination(row)

    async def delete(self, destination_id: str) -> bool:
        async with self._db.session() as session:
            row = await session.get(DestinationRow, destination_id)
            if row is None:
                return False
            await session.execute(
                delete(user_destinations).where(
                    user_destinations.c.destination_id == destination_id
                )
            )
            await session.delete(row)
            await session.commit()
            return True


class SqlUserStore:
    """UserStore backed by a SQL database."""

    def __init__(self, database: Database) -> None:
        self._db = database

    async def get(self, user_id: str) -> Optional[User]:
        async with self._db.session() as session:
            row = await session.get(UserRow, user_id)
            return _row_to_user(row) if row else None

    async def get_by_email(self, email: str) -> Optional[User]:
        async with self._db.session() as session:
            row = await session.scalar(select(UserRow).where(UserRow.email == email))
            return _row_to_user(row) if row else None

    async def list_users(self) -> Sequence[User]:
        async with self._db.session() as session:
            result = await session.scalars(select(UserRow).order_by(UserRow.name))
            return [_row_to_user(r) for r in result]

    async def create(self, user: User) -> User:
        async with self._db.session() as session:
            destinations = []
            if user.accessible_destination_ids:
                destinations = list(
                    await session.scalars(
                        select(DestinationRow).where(
                            DestinationRow.id.in_(user.accessible_destination_ids)
                        )
                    )
                )
            row = UserRow(
                id=user.id,
                name=user.name,
                email=user.email,
                password_hash=user.password_hash,
                role=user.role.value,
                destinations=destinations,
            )
            session.add(row)
            await session.commit()
            return _row_to_user(row)

    async def set_accessible_destinations(
        self, user_id: str, destination_ids: frozenset[str]
    ) -> Optional[User]:
        async with self._db.session() as session:
            row = await session.get(UserRow, user_id)
            if row is None:
                return None
            destinations = []
            if destination_ids:
                destinations = list(
                    await session.scalars(
                        select(DestinationRow).where(DestinationRow.id.in_(destination_ids))
                    )
                )
            row.destinations = destinations
            await session.commit()
            return _row_to_user(row)
