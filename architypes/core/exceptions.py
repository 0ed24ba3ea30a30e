# architypes/core/exceptions.py
"""
Taxonomie des erreurs métier.

Levées par l'engine et les services, traduites en HTTPException
par les routers uniquement. Aucune n'est retentée en interne.
"""


class ArchitypesError(Exception):
    """Racine de toutes les erreurs métier."""


class ValidationError(ArchitypesError, ValueError):
    """Entrée invalide (note, genre, identifiant de session…)."""


class InvalidRating(ValidationError):
    def __init__(self, rating):
        self.rating = rating
        super().__init__(f"Rating must be between 1 and 5 (got {rating!r})")


class InvalidGender(ValidationError):
    def __init__(self, gender):
        self.gender = gender
        super().__init__(f"Unknown gender {gender!r} — expected 'male' or 'female'")


class IncompleteAssessment(ArchitypesError):
    def __init__(self, answered: int, expected: int):
        self.answered = answered
        self.expected = expected
        super().__init__(
            f"All questions must be answered before calculating results ({answered}/{expected})"
        )


class InvalidSignature(ArchitypesError):
    """Notification de paiement rejetée : signature absente ou falsifiée."""


class DecodeError(ArchitypesError):
    """Résultat en cache illisible → à traiter comme un cache miss."""


class ReportNotUnlocked(ArchitypesError):
    """Refus de politique : rapport complet non terminé ou non payé."""


class AssessmentNotFound(ArchitypesError, LookupError):
    def __init__(self, reference):
        self.reference = reference
        super().__init__(f"Assessment not found: {reference}")
