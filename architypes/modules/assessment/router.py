# modules/assessment/router.py
"""
Endpoints du cycle de vie d'une évaluation.
Création → Questions → Réponses → Calcul → Scores → Rapport complet

Règle : ce fichier ne touche jamais la DB ni l'engine.
Tout passe par assessment_service.
"""
from fastapi import APIRouter, HTTPException, status
from typing import List

from architypes.core.exceptions import (
    AssessmentNotFound,
    IncompleteAssessment,
    ReportNotUnlocked,
    ValidationError,
)
from architypes.shared.deps import AssessmentDep, DbDep
from architypes.modules.assessment.service import AssessmentService
from architypes.modules.assessment.schemas import (
    AnswerIn,
    AnswerOut,
    ArchetypeScoreOut,
    AssessmentCreateIn,
    AssessmentOut,
    FullReportOut,
    ProfileOut,
    QuestionOut,
)

router = APIRouter(prefix="/assessments", tags=["Assessment"])
service = AssessmentService()


def _profile_out(scores, calculated_at=None, free_teaser=None) -> ProfileOut:
    return ProfileOut(
        scores=[ArchetypeScoreOut.model_validate(s) for s in scores],
        primary_archetype_id=scores[0].archetype_id if scores else None,
        secondary_archetype_id=scores[1].archetype_id if len(scores) > 1 else None,
        shadow_archetype_id=scores[-1].archetype_id if scores else None,
        free_teaser=free_teaser,
        calculated_at=calculated_at,
    )


# ─────────────────────────────────────────────
# SESSION
# ─────────────────────────────────────────────

@router.post(
    "",
    response_model=AssessmentOut,
    status_code=status.HTTP_201_CREATED,
    summary="Démarrer une évaluation",
)
async def create_assessment(payload: AssessmentCreateIn, db: DbDep):
    """Idempotent : une session déjà connue retourne l'évaluation existante."""
    try:
        return await service.create_assessment(
            db, session_id=payload.session_id, gender=payload.gender, email=payload.email
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/questions",
    response_model=List[QuestionOut],
    summary="Les 36 questions dans l'ordre d'affichage",
)
async def list_questions(db: DbDep):
    questions = await service.list_questions(db)
    if not questions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No questions available."
        )
    return questions


@router.get(
    "/{session_id}",
    response_model=AssessmentOut,
    summary="État d'une évaluation",
)
async def get_assessment(assessment: AssessmentDep):
    return assessment


# ─────────────────────────────────────────────
# RÉPONSES
# ─────────────────────────────────────────────

@router.put(
    "/{session_id}/answers/{question_id}",
    response_model=AnswerOut,
    summary="Enregistrer (ou corriger) une réponse",
)
async def record_answer(question_id: int, payload: AnswerIn, assessment: AssessmentDep, db: DbDep):
    try:
        await service.record_answer(db, assessment.id, question_id, payload.rating)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return AnswerOut(question_id=question_id, rating=payload.rating)


# ─────────────────────────────────────────────
# CALCUL & LECTURE
# ─────────────────────────────────────────────

@router.post(
    "/{session_id}/finalize",
    response_model=ProfileOut,
    summary="Calculer (ou recalculer) le profil",
)
async def finalize(assessment: AssessmentDep, db: DbDep):
    """
    Exige les 36 réponses. Recalcule et écrase le résultat précédent
    si l'évaluation est déjà terminée.
    """
    try:
        outcome = await service.finalize(db, assessment.id)
    except IncompleteAssessment as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _profile_out(list(outcome.profile.scores), outcome.calculated_at)


@router.get(
    "/{session_id}/scores",
    response_model=ProfileOut,
    summary="Profil classé (gratuit)",
)
async def get_scores(assessment: AssessmentDep, db: DbDep):
    scores = await service.get_archetype_scores(db, assessment.id)
    if not scores:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Results not calculated yet."
        )
    teaser = await service.get_free_teaser(db, scores[0].archetype_id)
    return _profile_out(scores, free_teaser=teaser)


@router.get(
    "/{session_id}/report",
    response_model=FullReportOut,
    summary="Rapport complet (terminé + payé)",
)
async def get_full_report(assessment: AssessmentDep, db: DbDep):
    """403 tant que l'évaluation n'est pas à la fois terminée et payée."""
    try:
        return await service.get_full_report(db, assessment.id)
    except ReportNotUnlocked as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except IncompleteAssessment as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except AssessmentNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
