"""
Point d'entrée unique pour tous les modèles SQLAlchemy.

TOUJOURS importer les modèles depuis ce fichier :
  from architypes.shared.models import Assessment, Question, ...

→ Garantit que tous les modèles sont enregistrés dans Base.metadata
  avant la création des tables (seed, create_all).
"""

from architypes.shared.models.Archetype  import Archetype, Question
from architypes.shared.models.Assessment import Assessment, AssessmentAnswer, AssessmentResult

__all__ = [
    # Référentiel
    "Archetype",
    "Question",
    # Évaluation
    "Assessment",
    "AssessmentAnswer",
    "AssessmentResult",
]
