# engine/profile/lifecycle.py
"""
État d'une évaluation sous forme de valeur immuable.

    Created → (en cours) → Completed → [Paid / débloqué]

Created et "en cours" ne sont pas distingués : la complétion se déduit
du nombre de réponses stockées (scoring.is_complete).

Chaque transition retourne un NOUVEL état — le service se charge
de le persister. Testable sans DB.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from architypes.core.exceptions import ReportNotUnlocked
from architypes.engine.profile.scoring import parse_gender
from architypes.shared.enums import Gender


@dataclass(frozen=True)
class AssessmentState:
    gender:            Gender
    completed:         bool = False
    completed_at:      Optional[datetime] = None
    paid:              bool = False
    payment_reference: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> "AssessmentState":
        """Lit l'état depuis un objet Assessment (ORM ou SimpleNamespace)."""
        return cls(
            gender=parse_gender(record.gender),
            completed=bool(record.is_completed),
            completed_at=record.completed_at,
            paid=bool(record.has_purchased_full_report),
            payment_reference=record.payment_reference,
        )


def complete(state: AssessmentState, at: datetime) -> AssessmentState:
    # Recalcul après complétion : la date de première complétion est conservée
    if state.completed and state.completed_at is not None:
        return state
    return replace(state, completed=True, completed_at=at)


def mark_paid(state: AssessmentState, payment_reference: str) -> AssessmentState:
    return replace(state, paid=True, payment_reference=payment_reference)


def authorize_full_report(state: AssessmentState) -> bool:
    return state.completed and state.paid


def require_full_report(state: AssessmentState) -> None:
    if not state.completed:
        raise ReportNotUnlocked("Assessment is not completed")
    if not state.paid:
        raise ReportNotUnlocked("Full report not purchased")
