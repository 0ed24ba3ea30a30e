# modules/payment/router.py
"""
Endpoints PayFast : formulaire de paiement signé + notification serveur (ITN).

/payments/notify est appelé par PayFast, sans session navigateur —
le seul garde-fou est la signature vérifiée par le service.
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, status

from architypes.core.exceptions import AssessmentNotFound, InvalidSignature, ValidationError
from architypes.shared.deps import DbDep
from architypes.modules.payment.service import PaymentService
from architypes.modules.payment.schemas import NotificationOut, PaymentFormIn, PaymentFormOut

router = APIRouter(prefix="/payments", tags=["Payment"])
service = PaymentService()


@router.post(
    "/{session_id}/form",
    response_model=PaymentFormOut,
    summary="Formulaire PayFast signé pour le rapport complet",
)
async def build_payment_form(session_id: UUID, db: DbDep, payload: Optional[PaymentFormIn] = None):
    payload = payload or PaymentFormIn()
    try:
        return await service.build_payment_form(
            db,
            session_id=session_id,
            return_url=payload.return_url,
            cancel_url=payload.cancel_url,
            notify_url=payload.notify_url,
        )
    except AssessmentNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/notify",
    response_model=NotificationOut,
    summary="Notification de paiement PayFast (ITN)",
    include_in_schema=False,
)
async def payment_notify(request: Request, db: DbDep):
    """
    Corps application/x-www-form-urlencoded envoyé par PayFast.
    200 dès que la notification est acquittée (y compris statut ≠ COMPLETE).
    """
    form = await request.form()
    fields = {key: str(value) for key, value in form.items()}

    try:
        return await service.handle_notification(db, fields)
    except InvalidSignature as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AssessmentNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
