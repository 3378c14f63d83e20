from dataclasses import dataclass
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.utility.logger import get_logger

logger = get_logger("toggle")


@dataclass(frozen=True)
class ToggleResult:
    is_on: bool
    # True only when this call inserted the row; a lost race is on but not created
    created: bool


async def toggle(db: AsyncSession, model, **keys) -> ToggleResult:
    """
    Flip the presence of the row identified by `keys`.

    An existing row is deleted (off). Otherwise a row is inserted (on); when a
    concurrent request inserted it first, the unique constraint fires and the
    state is still reported as on.
    """
    conditions = [getattr(model, name) == value for name, value in keys.items()]

    result = await db.execute(select(model.id).where(*conditions))
    existing_id = result.scalar_one_or_none()
    if existing_id is not None:
        await db.execute(delete(model).where(model.id == existing_id))
        await db.commit()
        return ToggleResult(is_on=False, created=False)

    db.add(model(**keys))
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("%s already present for %s, reporting it as on", model.__tablename__, keys)
        return ToggleResult(is_on=True, created=False)
    return ToggleResult(is_on=True, created=True)
