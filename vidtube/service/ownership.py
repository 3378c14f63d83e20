from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.utility.errors import NotFoundError, ForbiddenError


async def get_owned(db: AsyncSession, model, row_id: int, actor_id: int, resource: str, owner_field: str = "owner_id"):
    """
    Load a row by id and make sure `actor_id` owns it.

    Raises:
        NotFoundError: no row with that id (checked first)
        ForbiddenError: the row belongs to someone else
    """
    result = await db.execute(select(model).where(model.id == row_id))
    row = result.scalar_one_or_none()
    if not row:
        raise NotFoundError(resource)

    if getattr(row, owner_field) != actor_id:
        raise ForbiddenError(f"You don't have permission to modify this {resource.lower()}")
    return row
