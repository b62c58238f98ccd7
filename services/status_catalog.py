"""Status catalog: the lookup table of named states an application may occupy.

Loaded once at startup into a read-only mapping. Codes are an open set; the
seeded ones are named by ``models.StatusCode``.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import ApplicationStatus


class StatusCatalog(Mapping[int, str]):
    """Immutable mapping of status code -> status name."""

    def __init__(self, entries: Mapping[int, str]):
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, status_id: int) -> str:
        return self._entries[status_id]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def name_of(self, status_id: int) -> str | None:
        return self._entries.get(status_id)

    def as_list(self) -> list[dict]:
        return [{"status_id": sid, "status_name": self._entries[sid]} for sid in self]


async def load_status_catalog(session: AsyncSession) -> StatusCatalog:
    result = await session.execute(select(ApplicationStatus.status_id, ApplicationStatus.status_name))
    return StatusCatalog({row.status_id: row.status_name for row in result})
