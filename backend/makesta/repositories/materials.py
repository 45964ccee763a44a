"""Material Repository — material metadata and the download counter.

Invariants:
    - increment_download_count is a single UPDATE ... SET n = n + 1
      (the store serializes concurrent increments; no read-modify-write in Python)
    - delete returns whether a row was actually removed
"""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.models.material import Material
from makesta.models.user import User
from makesta.repositories.owned import Owned, owned_rows


class MaterialRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> list[Owned[Material]]:
        result = await self._db.execute(
            select(Material, User)
            .outerjoin(User, User.id == Material.uploaded_by)
            .order_by(Material.created_at.desc(), Material.id.desc()),
        )
        return owned_rows(result.all())

    async def get(self, material_id: int) -> Material | None:
        return await self._db.get(Material, material_id)

    async def get_with_uploader(self, material_id: int) -> Owned[Material] | None:
        result = await self._db.execute(
            select(Material, User)
            .outerjoin(User, User.id == Material.uploaded_by)
            .where(Material.id == material_id),
        )
        row = result.first()
        return Owned(entity=row[0], owner=row[1]) if row else None

    async def create(
        self,
        *,
        title: str,
        uploaded_by: int,
        description: str | None = None,
        file_path: str | None = None,
        file_name: str | None = None,
        file_size: int | None = None,
    ) -> Material:
        material = Material(
            title=title,
            description=description,
            file_path=file_path,
            file_name=file_name,
            file_size=file_size,
            download_count=0,
            uploaded_by=uploaded_by,
        )
        self._db.add(material)
        await self._db.commit()
        await self._db.refresh(material)
        return material

    async def increment_download_count(self, material_id: int) -> bool:
        result = await self._db.execute(
            update(Material)
            .where(Material.id == material_id)
            .values(download_count=Material.download_count + 1),
        )
        await self._db.commit()
        return result.rowcount > 0

    async def delete(self, material_id: int) -> bool:
        result = await self._db.execute(
            delete(Material).where(Material.id == material_id),
        )
        await self._db.commit()
        return result.rowcount > 0
