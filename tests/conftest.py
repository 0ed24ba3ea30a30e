# tests/conftest.py
"""
Fixtures et factories partagées sur l'ensemble de la suite de tests.

Trois couches :
    1. Engine  — fonctions pures, aucun mock nécessaire (factories de réponses)
    2. Service — mocks AsyncSession + repos via pytest-mock
    3. Router  — httpx.AsyncClient + dependency_overrides FastAPI
"""
import pytest
from types import SimpleNamespace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from architypes.main import app
from architypes.content.archetypes import ARCHETYPES_BY_ID
from architypes.core.database import get_db
from architypes.shared.deps import get_current_assessment
from architypes.shared.enums import Gender


SESSION_ID = UUID("3f2b8c1e-9a4d-4e7b-8c21-5d6f7a8b9c0d")


# ── Jeux de réponses (input principal de l'engine) ────────────────────────────

def answers_for(ratings_by_archetype: Dict[int, Sequence[int]]) -> List[Tuple[int, int]]:
    """{archetype_id: [r1, r2, r3]} → [(archetype_id, rating), ...] groupé dans l'ordre du dict."""
    return [
        (archetype_id, rating)
        for archetype_id, ratings in ratings_by_archetype.items()
        for rating in ratings
    ]


def answers_full(ratings: Optional[Dict[int, Sequence[int]]] = None) -> List[Tuple[int, int]]:
    """
    36 réponses couvrant les 12 archétypes.
    Par défaut : moyennes toutes distinctes, décroissantes de l'archétype 1 au 12.
    """
    default = {
        1:  (5, 5, 5),   # 5.0
        2:  (5, 5, 4),   # 4.67
        3:  (5, 4, 4),   # 4.33
        4:  (4, 4, 4),   # 4.0
        5:  (4, 4, 3),   # 3.67
        6:  (4, 3, 3),   # 3.33
        7:  (3, 3, 3),   # 3.0
        8:  (3, 3, 2),   # 2.67
        9:  (3, 2, 2),   # 2.33
        10: (2, 2, 2),   # 2.0
        11: (2, 2, 1),   # 1.67
        12: (1, 1, 1),   # 1.0
    }
    if ratings:
        default.update(ratings)
    return answers_for(default)


def archetypes_map() -> dict:
    """Référentiel complet (content/archetypes.py) indexé par id."""
    return dict(ARCHETYPES_BY_ID)


# ── Factories de modèles ORM (SimpleNamespace — léger, sans ORM) ──────────────

def make_assessment(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "session_id": SESSION_ID,
        "gender": Gender.FEMALE,
        "created_at": datetime(2026, 1, 7, tzinfo=timezone.utc),
        "completed_at": None,
        "is_completed": False,
        "has_purchased_full_report": False,
        "payment_reference": None,
        "email": "respondent@test.com",
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_question(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "text": "I naturally take charge and feel responsible for outcomes in groups",
        "archetype_id": 1,
        "display_order": 1,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_archetype(**kwargs) -> SimpleNamespace:
    ref = ARCHETYPES_BY_ID[kwargs.get("id", 1)]
    defaults = {
        "id": ref.id,
        "name": ref.name,
        "male_name": ref.male_name,
        "female_name": ref.female_name,
        "core_drive": ref.core_drive,
        "strengths": ref.strengths,
        "shadow": ref.shadow,
        "in_business": ref.in_business,
        "free_teaser": ref.free_teaser,
        "detailed_characteristics": ref.detailed_characteristics,
        "blindspots": ref.blindspots,
        "interaction_patterns": ref.interaction_patterns,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


# ── DB mock factory ───────────────────────────────────────────────────────────

def make_async_db() -> AsyncMock:
    """
    AsyncMock simulant une AsyncSession SQLAlchemy.
    Fournit une side_effect sur refresh() pour simuler le SET d'ID par le DB.
    """
    db = AsyncMock(spec=AsyncSession)
    added_objects: list = []

    def capture_add(obj):
        added_objects.append(obj)

    db.add = MagicMock(side_effect=capture_add)
    db.added_objects = added_objects

    async def refresh_side_effect(obj):
        if not getattr(obj, "id", None):
            try:
                obj.id = 1
            except (AttributeError, TypeError):
                pass

    db.refresh = AsyncMock(side_effect=refresh_side_effect)
    db.flush = AsyncMock()
    db.commit = AsyncMock()
    db.close = AsyncMock()

    return db


# ── Fixtures HTTP (httpx.AsyncClient + dependency_overrides) ─────────────────

@pytest.fixture
async def client():
    """Client sans évaluation résolue — endpoints publics ou service entièrement mocké."""
    mock_db = make_async_db()
    app.dependency_overrides[get_db] = lambda: mock_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def assessment_client():
    """Client dont le session_id du chemin résout vers make_assessment()."""
    mock_db = make_async_db()
    mock_assessment = make_assessment()
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_current_assessment] = lambda: mock_assessment
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        c.assessment = mock_assessment
        yield c
    app.dependency_overrides.clear()
