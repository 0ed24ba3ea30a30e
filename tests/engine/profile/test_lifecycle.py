# tests/engine/profile/test_lifecycle.py
"""
Tests unitaires pour engine.profile.lifecycle

Couverture :
    - from_record : lecture d'un Assessment (SimpleNamespace)
    - complete : première complétion datée, recalcul → date conservée
    - mark_paid : indépendant de la complétion (paiement avant ou après)
    - authorize_full_report : vrai seulement si complété ET payé
    - require_full_report : ReportNotUnlocked avec motif
"""
import pytest
from datetime import datetime, timezone

from architypes.core.exceptions import ReportNotUnlocked
from architypes.engine.profile.lifecycle import (
    AssessmentState,
    authorize_full_report,
    complete,
    mark_paid,
    require_full_report,
)
from architypes.shared.enums import Gender
from tests.conftest import make_assessment

pytestmark = pytest.mark.engine

T1 = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)
T2 = datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc)


def _state(**kwargs):
    return AssessmentState(gender=Gender.MALE, **kwargs)


class TestFromRecord:
    def test_etat_initial(self):
        state = AssessmentState.from_record(make_assessment())
        assert state.gender is Gender.FEMALE
        assert not state.completed
        assert not state.paid
        assert state.completed_at is None

    def test_etat_complet_et_paye(self):
        record = make_assessment(
            gender="male",
            is_completed=True,
            completed_at=T1,
            has_purchased_full_report=True,
            payment_reference="pf-123",
        )
        state = AssessmentState.from_record(record)
        assert state.gender is Gender.MALE
        assert state.completed and state.paid
        assert state.completed_at == T1
        assert state.payment_reference == "pf-123"


class TestComplete:
    def test_premiere_completion(self):
        state = complete(_state(), T1)
        assert state.completed
        assert state.completed_at == T1

    def test_recalcul_conserve_la_date(self):
        state = complete(complete(_state(), T1), T2)
        assert state.completed_at == T1

    def test_ne_touche_pas_au_paiement(self):
        state = complete(_state(paid=True, payment_reference="pf-1"), T1)
        assert state.paid
        assert state.payment_reference == "pf-1"

    def test_etat_immuable(self):
        original = _state()
        complete(original, T1)
        assert not original.completed


class TestAuthorize:
    def test_ni_complete_ni_paye(self):
        assert not authorize_full_report(_state())

    def test_complete_seulement(self):
        assert not authorize_full_report(complete(_state(), T1))

    def test_paye_seulement(self):
        assert not authorize_full_report(mark_paid(_state(), "pf-1"))

    def test_complete_puis_paye(self):
        state = mark_paid(complete(_state(), T1), "pf-1")
        assert authorize_full_report(state)

    def test_paye_puis_complete(self):
        state = complete(mark_paid(_state(), "pf-1"), T1)
        assert authorize_full_report(state)
        assert state.payment_reference == "pf-1"


class TestRequire:
    def test_non_complete(self):
        with pytest.raises(ReportNotUnlocked, match="not completed"):
            require_full_report(mark_paid(_state(), "pf-1"))

    def test_non_paye(self):
        with pytest.raises(ReportNotUnlocked, match="not purchased"):
            require_full_report(complete(_state(), T1))

    def test_debloque(self):
        assert require_full_report(mark_paid(complete(_state(), T1), "pf-1")) is None
