# engine/profile/scoring.py
"""
Calcul du profil d'archétypes — ZÉRO accès DB.
Reçoit les réponses en paramètre, retourne un profil classé.

Appelé par : modules/assessment/service.py

Algorithme :
    1. Regroupement des notes par archétype (ordre de première apparition)
    2. Moyenne arithmétique par groupe (float, aucun arrondi)
    3. Tri décroissant STABLE → deux moyennes égales gardent l'ordre
       de regroupement (détermine le primaire en cas d'ex-aequo)
    4. Rang = position 1-based
    5. Primaire = rang 1, secondaire = rang 2, ombre = dernier rang
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from architypes.core.exceptions import (
    IncompleteAssessment,
    InvalidGender,
    InvalidRating,
    ValidationError,
)
from architypes.shared.enums import Gender

# --- CONSTANTES ---
TOTAL_QUESTIONS = 36
MIN_RATING = 1
MAX_RATING = 5


# ── Dataclasses de résultat ───────────────────────────────────────────────────

@dataclass(frozen=True)
class ArchetypeScore:
    archetype_id:   int
    archetype_name: str
    display_name:   str     # Résolu selon le genre
    average_score:  float
    rank:           int     # 1 = moyenne la plus haute


@dataclass(frozen=True)
class RankedProfile:
    """
    Liste ordonnée des scores (rang 1 en tête).

    primary   → rang 1
    secondary → rang 2, None si un seul archétype
    shadow    → dernier rang (== primary si un seul archétype)
    """
    scores: Tuple[ArchetypeScore, ...]

    @property
    def primary(self) -> ArchetypeScore:
        return self.scores[0]

    @property
    def secondary(self) -> Optional[ArchetypeScore]:
        return self.scores[1] if len(self.scores) > 1 else None

    @property
    def shadow(self) -> ArchetypeScore:
        return self.scores[-1]

    @property
    def primary_archetype_id(self) -> int:
        return self.primary.archetype_id

    @property
    def secondary_archetype_id(self) -> Optional[int]:
        return self.secondary.archetype_id if self.secondary else None

    @property
    def shadow_archetype_id(self) -> int:
        return self.shadow.archetype_id


# ── Genre ─────────────────────────────────────────────────────────────────────

def parse_gender(value: Any) -> Gender:
    """Accepte un Gender ou sa valeur texte. Pas de troisième branche."""
    if isinstance(value, Gender):
        return value
    if isinstance(value, str):
        try:
            return Gender(value.strip().lower())
        except ValueError:
            pass
    raise InvalidGender(value)


def display_name(archetype: Any, gender: Any) -> str:
    """
    Nom affiché d'un archétype selon le genre déclaré.
    `archetype` : tout objet exposant male_name / female_name (ArchetypeRef ou ORM).
    """
    if parse_gender(gender) is Gender.MALE:
        return archetype.male_name
    return archetype.female_name


# ── Validation ────────────────────────────────────────────────────────────────

def validate_rating(rating: Any) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRating(rating)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidRating(rating)
    return rating


def is_complete(answer_count: int) -> bool:
    return answer_count == TOTAL_QUESTIONS


# ── Calcul ────────────────────────────────────────────────────────────────────

def compute_profile(
    answers: Sequence[Tuple[int, int]],   # [(archetype_id, rating), ...] dans l'ordre lu
    gender: Any,
    archetypes: Mapping[int, Any],         # {archetype_id: ArchetypeRef ou ORM}
) -> RankedProfile:
    """
    Fonction 100% pure : même jeu de réponses + même genre → même profil.
    La complétude (36 réponses) est vérifiée en amont par le service ;
    ici on refuse seulement un jeu vide.
    """
    gender = parse_gender(gender)
    if not answers:
        raise IncompleteAssessment(answered=0, expected=TOTAL_QUESTIONS)

    # dict → ordre d'insertion = ordre de première apparition
    groups: Dict[int, List[int]] = {}
    for archetype_id, rating in answers:
        groups.setdefault(archetype_id, []).append(rating)

    averages = [
        (archetype_id, sum(ratings) / len(ratings))
        for archetype_id, ratings in groups.items()
    ]
    # sorted() est stable, y compris avec reverse=True
    ordered = sorted(averages, key=lambda item: item[1], reverse=True)

    scores = []
    for index, (archetype_id, average) in enumerate(ordered):
        archetype = archetypes.get(archetype_id)
        if archetype is None:
            raise ValidationError(f"Unknown archetype id {archetype_id}")
        scores.append(ArchetypeScore(
            archetype_id=archetype_id,
            archetype_name=archetype.name,
            display_name=display_name(archetype, gender),
            average_score=average,
            rank=index + 1,
        ))

    return RankedProfile(scores=tuple(scores))
