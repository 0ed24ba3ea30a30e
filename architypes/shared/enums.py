# architypes/shared/enums.py
"""
Énumérations du projet Architypes.

Source unique de vérité pour les genres et statuts.
Importé par les modèles, schemas, services et engine.
"""

from enum import Enum


class Gender(str, Enum):
    MALE   = "male"
    FEMALE = "female"


class PaymentStatus(str, Enum):
    COMPLETE  = "COMPLETE"   # Seule valeur qui débloque le rapport
    FAILED    = "FAILED"
    PENDING   = "PENDING"
    CANCELLED = "CANCELLED"


class NotificationOutcome(str, Enum):
    PAID    = "paid"      # Signature OK + COMPLETE → rapport débloqué
    IGNORED = "ignored"   # Signature OK mais statut ≠ COMPLETE
