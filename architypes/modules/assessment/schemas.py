# architypes/modules/assessment/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from architypes.shared.enums import Gender


# ── Session ────────────────────────────────────────────────

class AssessmentCreateIn(BaseModel):
    session_id: UUID
    gender: Gender
    email: Optional[str] = None


class AssessmentOut(BaseModel):
    id: int
    session_id: UUID
    gender: Gender
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    is_completed: bool
    has_purchased_full_report: bool
    email: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


# ── Questionnaire ──────────────────────────────────────────

class QuestionOut(BaseModel):
    id: int
    text: str
    archetype_id: int
    display_order: int
    model_config = ConfigDict(from_attributes=True)


class AnswerIn(BaseModel):
    # Bornes 1-5 vérifiées par le service (InvalidRating → 400)
    rating: int


class AnswerOut(BaseModel):
    question_id: int
    rating: int


# ── Résultat ───────────────────────────────────────────────

class ArchetypeScoreOut(BaseModel):
    archetype_id: int
    archetype_name: str
    display_name: str
    average_score: float
    rank: int
    model_config = ConfigDict(from_attributes=True)


class ProfileOut(BaseModel):
    scores: List[ArchetypeScoreOut]
    primary_archetype_id: Optional[int] = None
    secondary_archetype_id: Optional[int] = None
    shadow_archetype_id: Optional[int] = None
    # Texte gratuit de l'archétype primaire (GET /scores uniquement)
    free_teaser: Optional[str] = None
    calculated_at: Optional[datetime] = None


class ArchetypeDetailOut(BaseModel):
    id: int
    name: str
    display_name: str
    average_score: float
    rank: int
    core_drive: str
    strengths: str
    shadow: str
    in_business: str
    detailed_characteristics: str
    blindspots: str
    interaction_patterns: str


class FullReportOut(BaseModel):
    session_id: UUID
    scores: List[ArchetypeScoreOut]
    primary: ArchetypeDetailOut
    secondary: Optional[ArchetypeDetailOut] = None
    shadow: ArchetypeDetailOut = Field(..., description="Archétype le moins exprimé")
