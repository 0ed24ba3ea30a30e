# architypes/shared/models/Assessment.py
"""
Modèles d'une session d'évaluation.

Assessment → AssessmentAnswer (36 max, une par question)
           → AssessmentResult (0..1, upsert par assessment_id)
                  ↓
        AssessmentResult.top_archetype_scores (texte JSON, engine/profile/codec.py)
        [{"ArchetypeId": 3, "ArchetypeName": "Magician/Mystic",
          "DisplayName": "The Mystic", "AverageScore": 4.67, "Rank": 1}, ...]

Note sur gender :
  Fixé à la création, jamais modifié ensuite — les noms affichés
  stockés dans le cache en dépendent.
"""
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    ForeignKey, UniqueConstraint, Enum as SAEnum, Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from architypes.core.database import Base
from architypes.shared.enums import Gender


class Assessment(Base):
    __tablename__ = "assessments"
    id                       = Column(Integer, primary_key=True, index=True)
    session_id               = Column(Uuid, nullable=False, unique=True, index=True)
    gender                   = Column(SAEnum(Gender), nullable=False)
    created_at               = Column(DateTime(timezone=True), server_default=func.now())
    completed_at             = Column(DateTime(timezone=True), nullable=True)
    is_completed             = Column(Boolean, default=False, nullable=False)
    has_purchased_full_report = Column(Boolean, default=False, nullable=False)
    payment_reference        = Column(String(100), nullable=True)
    email                    = Column(String(255), nullable=True)

    answers = relationship("AssessmentAnswer", back_populates="assessment", cascade="all, delete-orphan")
    result  = relationship("AssessmentResult", back_populates="assessment", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Assessment id={self.id} session={self.session_id} completed={self.is_completed}>"


class AssessmentAnswer(Base):
    __tablename__ = "assessment_answers"
    __table_args__ = (
        UniqueConstraint("assessment_id", "question_id", name="uq_answer_assessment_question"),
    )
    id            = Column(Integer, primary_key=True, index=True)
    assessment_id = Column(Integer, ForeignKey("assessments.id"), nullable=False, index=True)
    question_id   = Column(Integer, ForeignKey("questions.id"), nullable=False)
    rating        = Column(Integer, nullable=False)   # 1-5

    assessment = relationship("Assessment", back_populates="answers")
    question   = relationship("Question")

    def __repr__(self):
        return f"<AssessmentAnswer assessment={self.assessment_id} question={self.question_id} rating={self.rating}>"


class AssessmentResult(Base):
    __tablename__ = "assessment_results"
    id                     = Column(Integer, primary_key=True, index=True)
    assessment_id          = Column(Integer, ForeignKey("assessments.id"), nullable=False, unique=True, index=True)
    top_archetype_scores   = Column(Text,    nullable=False)
    primary_archetype_id   = Column(Integer, ForeignKey("archetypes.id"), nullable=False)
    secondary_archetype_id = Column(Integer, ForeignKey("archetypes.id"), nullable=True)
    shadow_archetype_id    = Column(Integer, ForeignKey("archetypes.id"), nullable=True)
    calculated_at          = Column(DateTime(timezone=True), nullable=False)

    assessment         = relationship("Assessment", back_populates="result")
    primary_archetype  = relationship("Archetype", foreign_keys=[primary_archetype_id])
    secondary_archetype = relationship("Archetype", foreign_keys=[secondary_archetype_id])
    shadow_archetype   = relationship("Archetype", foreign_keys=[shadow_archetype_id])

    def __repr__(self):
        return f"<AssessmentResult assessment={self.assessment_id} primary={self.primary_archetype_id}>"
