# modules/payment/service.py
"""
Workflow PayFast : formulaire sortant signé + traitement de la notification (ITN).

Notification entrante :
    1. Signature invalide        → InvalidSignature, AUCUN changement d'état
    2. payment_status ≠ COMPLETE → acquittée, ignorée
    3. custom_str1 non UUID      → ValidationError
    4. Session inconnue          → AssessmentNotFound
    5. Sinon                     → mark_paid(pf_payment_id)
"""
import logging
from typing import Dict, Mapping, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from architypes.core.config import settings
from architypes.core.exceptions import InvalidSignature, ValidationError
from architypes.engine.payment.signature import SIGNATURE_FIELD, sign, verify
from architypes.modules.assessment.service import AssessmentService
from architypes.shared.enums import NotificationOutcome, PaymentStatus

logger = logging.getLogger(__name__)

assessment_service = AssessmentService()

ITEM_NAME = "Full Archetype Report"


class PaymentService:

    # ─────────────────────────────────────────────
    # FORMULAIRE SORTANT
    # ─────────────────────────────────────────────

    async def build_payment_form(
        self,
        db: AsyncSession,
        session_id: UUID,
        return_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        notify_url: Optional[str] = None,
    ) -> Dict:
        """
        Champs du formulaire POST vers PayFast, signature en dernier.
        L'ordre d'insertion est celui attendu par la passerelle.
        """
        assessment = await assessment_service.get_by_session(db, session_id)

        fields: Dict[str, str] = {
            "merchant_id": settings.PAYFAST_MERCHANT_ID,
            "merchant_key": settings.PAYFAST_MERCHANT_KEY,
            "return_url": return_url or settings.PAYFAST_RETURN_URL,
            "cancel_url": cancel_url or settings.PAYFAST_CANCEL_URL,
            "notify_url": notify_url or settings.PAYFAST_NOTIFY_URL,
            "amount": f"{settings.FULL_REPORT_PRICE:.2f}",
            "item_name": ITEM_NAME,
            "item_description": f"Complete archetype analysis for assessment {session_id}",
            "email_address": assessment.email or "",
            "custom_str1": str(session_id),
        }
        fields[SIGNATURE_FIELD] = sign(fields, settings.PAYFAST_PASSPHRASE)

        return {"action": settings.PAYFAST_PROCESS_URL, "fields": fields}

    # ─────────────────────────────────────────────
    # NOTIFICATION ENTRANTE (ITN)
    # ─────────────────────────────────────────────

    async def handle_notification(self, db: AsyncSession, fields: Mapping[str, str]) -> Dict:
        logger.info(
            "[PAYMENT] Notification reçue : status=%s session=%s ref=%s",
            fields.get("payment_status"), fields.get("custom_str1"), fields.get("pf_payment_id"),
        )

        if not verify(fields, settings.PAYFAST_PASSPHRASE):
            logger.warning("[PAYMENT] Signature invalide — notification rejetée")
            raise InvalidSignature("Invalid signature")

        payment_status = fields.get("payment_status", "")
        if payment_status != PaymentStatus.COMPLETE.value:
            logger.info("[PAYMENT] Paiement non complet (status=%s) — ignoré", payment_status)
            return {"status": NotificationOutcome.IGNORED, "session_id": None, "payment_reference": None}

        raw_session = fields.get("custom_str1", "")
        try:
            session_id = UUID(raw_session)
        except (ValueError, TypeError, AttributeError):
            logger.warning("[PAYMENT] session_id invalide dans la notification : %r", raw_session)
            raise ValidationError(f"Invalid session id {raw_session!r}")

        payment_reference = fields.get("pf_payment_id", "")
        assessment = await assessment_service.get_by_session(db, session_id)
        await assessment_service.mark_paid(db, assessment.id, payment_reference)

        logger.info("[PAYMENT] Paiement traité pour la session %s (ref=%s)", session_id, payment_reference)
        return {
            "status": NotificationOutcome.PAID,
            "session_id": session_id,
            "payment_reference": payment_reference,
        }
