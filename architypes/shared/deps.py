# architypes/shared/deps.py
"""
Dépendances FastAPI réutilisables dans tous les routers.
Injectées via Depends() — jamais appelées directement.

Pas de compte utilisateur : une évaluation est identifiée par son
session_id (clé de corrélation portée aussi par custom_str1 côté PayFast).
"""
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from architypes.core.database import get_db
from architypes.core.exceptions import AssessmentNotFound
from architypes.modules.assessment.service import AssessmentService
from architypes.shared.models import Assessment

_assessment_service = AssessmentService()


async def get_current_assessment(
    session_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Assessment:
    """Évaluation désignée par le session_id du chemin, sinon 404."""
    try:
        return await _assessment_service.get_by_session(db, session_id)
    except AssessmentNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )


# ── Type aliases pour les routers ─────────────────────────
DbDep         = Annotated[AsyncSession, Depends(get_db)]
AssessmentDep = Annotated[Assessment, Depends(get_current_assessment)]
