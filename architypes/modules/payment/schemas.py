# architypes/modules/payment/schemas.py
from pydantic import BaseModel, Field
from typing import Dict, Optional
from uuid import UUID

from architypes.shared.enums import NotificationOutcome


# ── Formulaire sortant ─────────────────────────────────────

class PaymentFormIn(BaseModel):
    """URLs optionnelles — à défaut, celles de la configuration."""
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None
    notify_url: Optional[str] = None


class PaymentFormOut(BaseModel):
    """
    Le frontend poste `fields` tels quels (champs cachés) vers `action`.
    `fields` contient déjà la signature.
    """
    action: str = Field(..., description="URL de traitement PayFast")
    fields: Dict[str, str]


# ── Notification entrante ──────────────────────────────────

class NotificationOut(BaseModel):
    status: NotificationOutcome
    session_id: Optional[UUID] = None
    payment_reference: Optional[str] = None
