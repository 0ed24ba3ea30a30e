# architypes/shared/models/Archetype.py
"""
Données de référence : Archetype → Questions.

Peuplées une seule fois par seed/seed_archetypes.py depuis content/archetypes.py.
Jamais modifiées par le core.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from architypes.core.database import Base


class Archetype(Base):
    __tablename__ = "archetypes"
    id                       = Column(Integer, primary_key=True, index=True)
    name                     = Column(String(100), nullable=False, unique=True)
    male_name                = Column(String(100), nullable=False)
    female_name              = Column(String(100), nullable=False)
    core_drive               = Column(Text, nullable=False)
    strengths                = Column(Text, nullable=False)
    shadow                   = Column(Text, nullable=False)
    in_business              = Column(Text, nullable=False)
    free_teaser              = Column(Text, nullable=False)
    detailed_characteristics = Column(Text, nullable=False)
    blindspots               = Column(Text, nullable=False)
    interaction_patterns     = Column(Text, nullable=False)

    questions = relationship("Question", back_populates="archetype")

    def __repr__(self):
        return f"<Archetype id={self.id} name={self.name}>"


class Question(Base):
    __tablename__ = "questions"
    id            = Column(Integer, primary_key=True, index=True)
    text          = Column(Text,    nullable=False)
    archetype_id  = Column(Integer, ForeignKey("archetypes.id"), nullable=False, index=True)
    display_order = Column(Integer, nullable=False, index=True)

    archetype = relationship("Archetype", back_populates="questions")

    def __repr__(self):
        return f"<Question id={self.id} archetype={self.archetype_id}>"
