# tests/modules/payment/test_service.py
"""
Tests unitaires pour modules.payment.service.PaymentService

Couverture :
    build_payment_form() :
        - Champs dans l'ordre attendu, signature en dernier
        - Signature vérifiable (avec et sans passphrase)
        - URLs par défaut (configuration) ou fournies
        - Montant formaté à 2 décimales, custom_str1 = session_id
        - Session inconnue → AssessmentNotFound

    handle_notification() :
        - Signature falsifiée → InvalidSignature, mark_paid jamais appelé
        - payment_status ≠ COMPLETE → ignorée
        - custom_str1 non UUID → ValidationError
        - Session inconnue → AssessmentNotFound
        - Succès → mark_paid(assessment.id, pf_payment_id)
"""
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from architypes.core.config import settings
from architypes.core.exceptions import AssessmentNotFound, InvalidSignature, ValidationError
from architypes.engine.payment.signature import sign, verify
from architypes.modules.payment.service import ITEM_NAME, PaymentService
from architypes.shared.enums import NotificationOutcome
from tests.conftest import SESSION_ID, make_assessment

pytestmark = pytest.mark.service

service = PaymentService()

ASSESSMENT_SERVICE = "architypes.modules.payment.service.assessment_service"

FORM_KEYS = [
    "merchant_id", "merchant_key", "return_url", "cancel_url", "notify_url",
    "amount", "item_name", "item_description", "email_address", "custom_str1",
    "signature",
]


def _notification(passphrase=None, **kwargs):
    fields = {
        "m_payment_id": "",
        "pf_payment_id": "1089250",
        "payment_status": "COMPLETE",
        "item_name": ITEM_NAME,
        "amount_gross": "149.00",
        "custom_str1": str(SESSION_ID),
        "merchant_id": settings.PAYFAST_MERCHANT_ID,
    }
    fields.update(kwargs)
    fields["signature"] = sign(fields, passphrase)
    return fields


# ── build_payment_form ────────────────────────────────────────────────────────

class TestBuildPaymentForm:
    @pytest.mark.asyncio
    async def test_champs_et_ordre(self, mocker):
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        form = await service.build_payment_form(AsyncMock(), SESSION_ID)

        assert form["action"] == settings.PAYFAST_PROCESS_URL
        assert list(form["fields"].keys()) == FORM_KEYS

    @pytest.mark.asyncio
    async def test_valeurs(self, mocker):
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        fields = (await service.build_payment_form(AsyncMock(), SESSION_ID))["fields"]

        assert fields["merchant_id"] == settings.PAYFAST_MERCHANT_ID
        assert fields["item_name"] == "Full Archetype Report"
        assert fields["item_description"] == f"Complete archetype analysis for assessment {SESSION_ID}"
        assert fields["custom_str1"] == str(SESSION_ID)
        assert fields["email_address"] == "respondent@test.com"
        assert fields["return_url"] == settings.PAYFAST_RETURN_URL

    @pytest.mark.asyncio
    async def test_montant_deux_decimales(self, mocker):
        mocker.patch.object(settings, "FULL_REPORT_PRICE", Decimal("99.5"))
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        fields = (await service.build_payment_form(AsyncMock(), SESSION_ID))["fields"]
        assert fields["amount"] == "99.50"

    @pytest.mark.asyncio
    async def test_urls_fournies(self, mocker):
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        fields = (await service.build_payment_form(
            AsyncMock(), SESSION_ID,
            return_url="https://app.test/done", cancel_url="https://app.test/cancel",
        ))["fields"]
        assert fields["return_url"] == "https://app.test/done"
        assert fields["cancel_url"] == "https://app.test/cancel"
        assert fields["notify_url"] == settings.PAYFAST_NOTIFY_URL

    @pytest.mark.asyncio
    async def test_email_absent(self, mocker):
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment(email=None)))
        fields = (await service.build_payment_form(AsyncMock(), SESSION_ID))["fields"]
        assert fields["email_address"] == ""

    @pytest.mark.asyncio
    async def test_signature_verifiable(self, mocker):
        mocker.patch.object(settings, "PAYFAST_PASSPHRASE", None)
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        fields = (await service.build_payment_form(AsyncMock(), SESSION_ID))["fields"]
        assert verify(fields)

    @pytest.mark.asyncio
    async def test_signature_avec_passphrase(self, mocker):
        mocker.patch.object(settings, "PAYFAST_PASSPHRASE", "jt7NOE43FZPn")
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        fields = (await service.build_payment_form(AsyncMock(), SESSION_ID))["fields"]
        assert verify(fields, "jt7NOE43FZPn")
        assert not verify(fields)

    @pytest.mark.asyncio
    async def test_session_inconnue(self, mocker):
        mocker.patch(
            f"{ASSESSMENT_SERVICE}.get_by_session",
            AsyncMock(side_effect=AssessmentNotFound(SESSION_ID)),
        )
        with pytest.raises(AssessmentNotFound):
            await service.build_payment_form(AsyncMock(), SESSION_ID)


# ── handle_notification ───────────────────────────────────────────────────────

class TestHandleNotification:
    @pytest.fixture(autouse=True)
    def _no_passphrase(self, mocker):
        mocker.patch.object(settings, "PAYFAST_PASSPHRASE", None)

    @pytest.mark.asyncio
    async def test_signature_falsifiee(self, mocker):
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())
        fields = _notification()
        fields["amount_gross"] = "1.00"
        with pytest.raises(InvalidSignature):
            await service.handle_notification(AsyncMock(), fields)
        mark_paid.assert_not_called()

    @pytest.mark.asyncio
    async def test_signature_absente(self, mocker):
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())
        fields = _notification()
        del fields["signature"]
        with pytest.raises(InvalidSignature):
            await service.handle_notification(AsyncMock(), fields)
        mark_paid.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payment_status", ["FAILED", "PENDING", "CANCELLED", ""])
    async def test_statut_non_complet_ignore(self, mocker, payment_status):
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())
        result = await service.handle_notification(
            AsyncMock(), _notification(payment_status=payment_status)
        )
        assert result["status"] is NotificationOutcome.IGNORED
        mark_paid.assert_not_called()

    @pytest.mark.asyncio
    async def test_session_id_invalide(self, mocker):
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())
        with pytest.raises(ValidationError):
            await service.handle_notification(AsyncMock(), _notification(custom_str1="not-a-uuid"))
        mark_paid.assert_not_called()

    @pytest.mark.asyncio
    async def test_session_inconnue(self, mocker):
        mocker.patch(
            f"{ASSESSMENT_SERVICE}.get_by_session",
            AsyncMock(side_effect=AssessmentNotFound(SESSION_ID)),
        )
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())
        with pytest.raises(AssessmentNotFound):
            await service.handle_notification(AsyncMock(), _notification())
        mark_paid.assert_not_called()

    @pytest.mark.asyncio
    async def test_paiement_complet(self, mocker):
        assessment = make_assessment(id=7)
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=assessment))
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())
        db = AsyncMock()

        result = await service.handle_notification(db, _notification())

        assert result["status"] is NotificationOutcome.PAID
        assert result["session_id"] == SESSION_ID
        assert result["payment_reference"] == "1089250"
        mark_paid.assert_awaited_once_with(db, 7, "1089250")

    @pytest.mark.asyncio
    async def test_passphrase_configuree(self, mocker):
        mocker.patch.object(settings, "PAYFAST_PASSPHRASE", "secret")
        mocker.patch(f"{ASSESSMENT_SERVICE}.get_by_session", AsyncMock(return_value=make_assessment()))
        mark_paid = mocker.patch(f"{ASSESSMENT_SERVICE}.mark_paid", AsyncMock())

        with pytest.raises(InvalidSignature):
            await service.handle_notification(AsyncMock(), _notification())

        result = await service.handle_notification(AsyncMock(), _notification(passphrase="secret"))
        assert result["status"] is NotificationOutcome.PAID
        mark_paid.assert_awaited_once()
