# tests/seed/test_seed_archetypes.py
"""
Tests pour seed.seed_archetypes.seed()

Couverture :
    - Base vide → 12 archétypes + 36 questions ajoutés, commit
    - Référentiel déjà présent → aucun ajout, retourne False
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from architypes.seed.seed_archetypes import seed
from architypes.shared.models import Archetype, Question
from tests.conftest import make_async_db

pytestmark = pytest.mark.service


def _db_with_count(count: int):
    db = make_async_db()
    db.execute = AsyncMock(return_value=MagicMock(scalar=MagicMock(return_value=count)))
    return db


@pytest.mark.asyncio
async def test_base_vide_peuplee():
    db = _db_with_count(0)
    assert await seed(db) is True

    archetypes = [o for o in db.added_objects if isinstance(o, Archetype)]
    questions = [o for o in db.added_objects if isinstance(o, Question)]
    assert len(archetypes) == 12
    assert len(questions) == 36
    assert sorted(q.display_order for q in questions) == list(range(1, 37))
    assert archetypes[0].female_name == "The Queen"
    db.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_referentiel_existant_ignore():
    db = _db_with_count(12)
    assert await seed(db) is False
    assert db.added_objects == []
    db.commit.assert_not_called()
