# seed/seed_archetypes.py
"""
Peuplement du référentiel : 12 archétypes + 36 questions.

Source : content/archetypes.py (table immuable).
Idempotent — ne fait rien si des archétypes existent déjà.

Usage :
    python -m architypes.seed.seed_archetypes
"""
import asyncio
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from architypes.content.archetypes import ARCHETYPES, QUESTIONS
from architypes.core.database import Base, SessionLocal, engine
from architypes.shared.models import Archetype, Question

logger = logging.getLogger(__name__)


async def seed(db: AsyncSession) -> bool:
    """Retourne False si le référentiel était déjà présent."""
    existing = await db.execute(select(func.count(Archetype.id)))
    if existing.scalar():
        logger.info("[SEED] Référentiel déjà présent — rien à faire.")
        return False

    for ref in ARCHETYPES:
        db.add(Archetype(
            id=ref.id,
            name=ref.name,
            male_name=ref.male_name,
            female_name=ref.female_name,
            core_drive=ref.core_drive,
            strengths=ref.strengths,
            shadow=ref.shadow,
            in_business=ref.in_business,
            free_teaser=ref.free_teaser,
            detailed_characteristics=ref.detailed_characteristics,
            blindspots=ref.blindspots,
            interaction_patterns=ref.interaction_patterns,
        ))
    await db.flush()

    for q in QUESTIONS:
        db.add(Question(
            id=q.id,
            text=q.text,
            archetype_id=q.archetype_id,
            display_order=q.order,
        ))
    await db.commit()

    logger.info("[SEED] %d archétypes, %d questions créés", len(ARCHETYPES), len(QUESTIONS))
    return True


async def main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with SessionLocal() as db:
        await seed(db)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
