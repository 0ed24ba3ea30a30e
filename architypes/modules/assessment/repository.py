# modules/assessment/repository.py
"""
Accès DB pour le module assessment.
Toute la logique SQL est ici — les services n'écrivent jamais de queries directes.

Concurrence : l'unicité (assessment_id, question_id) et (assessment_id)
sur assessment_results est garantie par les contraintes de la table.
Les deux upserts sont un seul INSERT ... ON CONFLICT DO UPDATE :
deux écritures concurrentes sur la même clé → la dernière gagne, jamais d'IntegrityError.
"""
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from architypes.engine.profile.lifecycle import AssessmentState
from architypes.shared.enums import Gender
from architypes.shared.models import (
    Archetype, Question,
    Assessment, AssessmentAnswer, AssessmentResult,
)

# Dialectes supportant ON CONFLICT (asyncpg en prod, aiosqlite en tests)
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite":     sqlite.insert,
}


def _upsert_insert(db: AsyncSession, model):
    return _UPSERT_INSERTS[db.get_bind().dialect.name](model)


class AssessmentRepository:

    # ─────────────────────────────────────────────
    # ASSESSMENT
    # ─────────────────────────────────────────────

    async def get_assessment(self, db: AsyncSession, assessment_id: int) -> Optional[Assessment]:
        return await db.get(Assessment, assessment_id)

    async def get_by_session(self, db: AsyncSession, session_id: UUID) -> Optional[Assessment]:
        result = await db.execute(
            select(Assessment).where(Assessment.session_id == session_id)
        )
        return result.scalar_one_or_none()

    async def create_assessment(
        self,
        db: AsyncSession,
        session_id: UUID,
        gender: Gender,
        email: Optional[str] = None,
    ) -> Assessment:
        db_obj = Assessment(
            session_id=session_id,
            gender=gender,
            email=email,
            is_completed=False,
            has_purchased_full_report=False,
        )
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def save_state(
        self, db: AsyncSession, assessment: Assessment, state: AssessmentState
    ) -> Assessment:
        """
        Persiste un AssessmentState (engine/profile/lifecycle.py).
        Le genre n'est jamais réécrit.
        """
        assessment.is_completed = state.completed
        assessment.completed_at = state.completed_at
        assessment.has_purchased_full_report = state.paid
        assessment.payment_reference = state.payment_reference
        await db.commit()
        return assessment

    # ─────────────────────────────────────────────
    # RÉFÉRENTIEL
    # ─────────────────────────────────────────────

    async def list_questions(self, db: AsyncSession) -> List[Question]:
        result = await db.execute(select(Question).order_by(Question.display_order))
        return list(result.scalars().all())

    async def question_exists(self, db: AsyncSession, question_id: int) -> bool:
        result = await db.execute(select(Question.id).where(Question.id == question_id))
        return result.scalar_one_or_none() is not None

    async def get_archetype(self, db: AsyncSession, archetype_id: int) -> Optional[Archetype]:
        return await db.get(Archetype, archetype_id)

    async def get_archetypes_map(self, db: AsyncSession) -> Dict[int, Archetype]:
        result = await db.execute(select(Archetype))
        return {a.id: a for a in result.scalars().all()}

    # ─────────────────────────────────────────────
    # RÉPONSES
    # ─────────────────────────────────────────────

    async def list_answers(self, db: AsyncSession, assessment_id: int) -> List[Tuple[int, int]]:
        """
        [(archetype_id, rating), ...] dans l'ordre d'insertion des réponses.
        Cet ordre alimente le départage stable des ex-aequo dans l'engine.
        """
        result = await db.execute(
            select(Question.archetype_id, AssessmentAnswer.rating)
            .join(Question, Question.id == AssessmentAnswer.question_id)
            .where(AssessmentAnswer.assessment_id == assessment_id)
            .order_by(AssessmentAnswer.id.asc())
        )
        return [(row.archetype_id, row.rating) for row in result.all()]

    async def count_answers(self, db: AsyncSession, assessment_id: int) -> int:
        result = await db.execute(
            select(func.count(AssessmentAnswer.id))
            .where(AssessmentAnswer.assessment_id == assessment_id)
        )
        return result.scalar() or 0

    async def upsert_answer(
        self, db: AsyncSession, assessment_id: int, question_id: int, rating: int
    ) -> None:
        """
        Réponse déjà présente → la note est remplacée sur la même ligne
        (l'id, donc l'ordre d'insertion lu par list_answers, ne change pas).
        """
        stmt = _upsert_insert(db, AssessmentAnswer).values(
            assessment_id=assessment_id,
            question_id=question_id,
            rating=rating,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["assessment_id", "question_id"],
            set_={"rating": stmt.excluded.rating},
        )
        await db.execute(stmt)
        await db.commit()

    # ─────────────────────────────────────────────
    # RÉSULTAT (cache)
    # ─────────────────────────────────────────────

    async def get_cached_result(self, db: AsyncSession, assessment_id: int) -> Optional[str]:
        result = await db.execute(
            select(AssessmentResult.top_archetype_scores)
            .where(AssessmentResult.assessment_id == assessment_id)
        )
        return result.scalar_one_or_none()

    async def put_cached_result(
        self,
        db: AsyncSession,
        assessment_id: int,
        serialized: str,
        primary_archetype_id: int,
        secondary_archetype_id: Optional[int],
        shadow_archetype_id: Optional[int],
        calculated_at: datetime,
    ) -> None:
        """
        Upsert par assessment_id — remplace le calcul précédent, jamais d'historique.
        Pas de commit ici : validé avec save_state() dans la même transaction.
        """
        values = {
            "top_archetype_scores": serialized,
            "primary_archetype_id": primary_archetype_id,
            "secondary_archetype_id": secondary_archetype_id,
            "shadow_archetype_id": shadow_archetype_id,
            "calculated_at": calculated_at,
        }
        stmt = _upsert_insert(db, AssessmentResult).values(assessment_id=assessment_id, **values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["assessment_id"],
            set_={key: stmt.excluded[key] for key in values},
        )
        await db.execute(stmt)
