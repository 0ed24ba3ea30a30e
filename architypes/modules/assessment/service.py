# modules/assessment/service.py
"""
Orchestration du cycle de vie des évaluations.

Responsabilités :
1. Interroger la DB via repository (réponses, référentiel, cache)
2. Déléguer le calcul à engine/profile/scoring.py
3. Sérialiser le profil (engine/profile/codec.py) et l'upserter
4. Faire évoluer l'état via engine/profile/lifecycle.py puis le persister
5. Garder l'accès au rapport complet (terminé ET payé)
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from architypes.core.exceptions import (
    AssessmentNotFound,
    DecodeError,
    IncompleteAssessment,
    ValidationError,
)
from architypes.engine.profile import lifecycle
from architypes.engine.profile.codec import deserialize, serialize
from architypes.engine.profile.lifecycle import AssessmentState
from architypes.engine.profile.scoring import (
    TOTAL_QUESTIONS,
    ArchetypeScore,
    RankedProfile,
    compute_profile,
    display_name,
    is_complete,
    parse_gender,
    validate_rating,
)
from architypes.modules.assessment.repository import AssessmentRepository

logger = logging.getLogger(__name__)

repo = AssessmentRepository()


@dataclass(frozen=True)
class FinalizeOutcome:
    profile:       RankedProfile
    serialized:    str
    state:         AssessmentState
    calculated_at: datetime


class AssessmentService:

    # ─────────────────────────────────────────────
    # SESSION
    # ─────────────────────────────────────────────

    async def create_assessment(
        self,
        db: AsyncSession,
        session_id: UUID,
        gender: Any,
        email: Optional[str] = None,
    ):
        """
        Idempotent par session_id : retourne l'évaluation existante telle quelle.
        Le genre n'est jamais modifié après création.
        """
        gender = parse_gender(gender)
        existing = await repo.get_by_session(db, session_id)
        if existing:
            return existing
        assessment = await repo.create_assessment(db, session_id=session_id, gender=gender, email=email)
        logger.info("[ASSESSMENT] Session %s créée (id=%s)", session_id, assessment.id)
        return assessment

    async def get_by_session(self, db: AsyncSession, session_id: UUID):
        assessment = await repo.get_by_session(db, session_id)
        if not assessment:
            raise AssessmentNotFound(session_id)
        return assessment

    async def list_questions(self, db: AsyncSession) -> List:
        return await repo.list_questions(db)

    # ─────────────────────────────────────────────
    # RÉPONSES
    # ─────────────────────────────────────────────

    async def record_answer(
        self, db: AsyncSession, assessment_id: int, question_id: int, rating: int
    ) -> None:
        """Upsert : une nouvelle note écrase la précédente. Aucun effet sur la complétion."""
        validate_rating(rating)
        await self._require(db, assessment_id)
        if not await repo.question_exists(db, question_id):
            raise ValidationError(f"Unknown question id {question_id}")
        await repo.upsert_answer(db, assessment_id, question_id, rating)

    # ─────────────────────────────────────────────
    # CALCUL
    # ─────────────────────────────────────────────

    async def finalize(self, db: AsyncSession, assessment_id: int) -> FinalizeOutcome:
        """
        Pipeline de calcul :
        1. Vérification de complétude (exactement 36 réponses)
        2. Calcul pur (engine)
        3. Upsert du résultat en cache (remplace tout calcul précédent)
        4. Transition Completed + persistance

        Rappeler finalize() après complétion recalcule et écrase — pas une erreur.
        """
        assessment = await self._require(db, assessment_id)

        answers = await repo.list_answers(db, assessment_id)
        if not is_complete(len(answers)):
            raise IncompleteAssessment(answered=len(answers), expected=TOTAL_QUESTIONS)

        archetypes = await repo.get_archetypes_map(db)
        profile = compute_profile(answers, assessment.gender, archetypes)
        serialized = serialize(profile)

        now = datetime.now(timezone.utc)
        await repo.put_cached_result(
            db,
            assessment_id=assessment_id,
            serialized=serialized,
            primary_archetype_id=profile.primary_archetype_id,
            secondary_archetype_id=profile.secondary_archetype_id,
            shadow_archetype_id=profile.shadow_archetype_id,
            calculated_at=now,
        )

        state = lifecycle.complete(AssessmentState.from_record(assessment), now)
        await repo.save_state(db, assessment, state)

        logger.info(
            "[ASSESSMENT] Résultats calculés pour %s : primaire=%s ombre=%s",
            assessment_id, profile.primary_archetype_id, profile.shadow_archetype_id,
        )
        return FinalizeOutcome(profile=profile, serialized=serialized, state=state, calculated_at=now)

    async def get_archetype_scores(self, db: AsyncSession, assessment_id: int) -> List[ArchetypeScore]:
        """
        Lecture du cache. Cache absent → liste vide.
        Cache illisible → traité comme absent : recalcul si les 36 réponses sont là.
        """
        cached = await repo.get_cached_result(db, assessment_id)
        if cached is None:
            return []
        try:
            return list(deserialize(cached).scores)
        except DecodeError as e:
            logger.warning("[ASSESSMENT] Cache illisible pour %s (%s) — recalcul", assessment_id, e)

        if not is_complete(await repo.count_answers(db, assessment_id)):
            return []
        outcome = await self.finalize(db, assessment_id)
        return list(outcome.profile.scores)

    async def get_free_teaser(self, db: AsyncSession, archetype_id: int) -> Optional[str]:
        """Aperçu gratuit de l'archétype primaire, affiché avec les scores."""
        archetype = await repo.get_archetype(db, archetype_id)
        return archetype.free_teaser if archetype else None

    # ─────────────────────────────────────────────
    # PAIEMENT & ACCÈS AU RAPPORT
    # ─────────────────────────────────────────────

    async def mark_paid(
        self, db: AsyncSession, assessment_id: int, payment_reference: str
    ) -> AssessmentState:
        """Évaluation inconnue → AssessmentNotFound (plus d'abandon silencieux)."""
        assessment = await self._require(db, assessment_id)
        state = lifecycle.mark_paid(AssessmentState.from_record(assessment), payment_reference)
        await repo.save_state(db, assessment, state)
        logger.info("[ASSESSMENT] Rapport complet acheté pour %s (ref=%s)", assessment_id, payment_reference)
        return state

    async def authorize_full_report(self, db: AsyncSession, assessment_id: int) -> bool:
        assessment = await self._require(db, assessment_id)
        return lifecycle.authorize_full_report(AssessmentState.from_record(assessment))

    async def require_full_report(self, db: AsyncSession, assessment_id: int):
        """Porte d'entrée obligatoire de tout rendu du rapport détaillé."""
        assessment = await self._require(db, assessment_id)
        lifecycle.require_full_report(AssessmentState.from_record(assessment))
        return assessment

    async def get_full_report(self, db: AsyncSession, assessment_id: int) -> Dict:
        """
        Données du rapport complet : scores classés + contenu détaillé
        des archétypes primaire, secondaire et ombre.
        """
        assessment = await self.require_full_report(db, assessment_id)
        scores = await self.get_archetype_scores(db, assessment_id)
        if not scores:
            raise IncompleteAssessment(
                answered=await repo.count_answers(db, assessment_id), expected=TOTAL_QUESTIONS
            )
        archetypes = await repo.get_archetypes_map(db)

        def detail(score: Optional[ArchetypeScore]) -> Optional[Dict]:
            if score is None:
                return None
            a = archetypes[score.archetype_id]
            return {
                "id": a.id,
                "name": a.name,
                "display_name": display_name(a, assessment.gender),
                "average_score": score.average_score,
                "rank": score.rank,
                "core_drive": a.core_drive,
                "strengths": a.strengths,
                "shadow": a.shadow,
                "in_business": a.in_business,
                "detailed_characteristics": a.detailed_characteristics,
                "blindspots": a.blindspots,
                "interaction_patterns": a.interaction_patterns,
            }

        return {
            "session_id": assessment.session_id,
            "scores": scores,
            "primary": detail(scores[0]),
            "secondary": detail(scores[1] if len(scores) > 1 else None),
            "shadow": detail(scores[-1]),
        }

    # ─────────────────────────────────────────────
    # HELPERS
    # ─────────────────────────────────────────────

    async def _require(self, db: AsyncSession, assessment_id: int):
        assessment = await repo.get_assessment(db, assessment_id)
        if not assessment:
            raise AssessmentNotFound(assessment_id)
        return assessment
