# engine/profile/codec.py
"""
Sérialisation du profil classé pour le cache AssessmentResult.top_archetype_scores.

Format : tableau JSON d'enregistrements, rang 1 en tête.
    [{"ArchetypeId": 3, "ArchetypeName": "Magician/Mystic",
      "DisplayName": "The Mystic", "AverageScore": 4.666666666666667, "Rank": 1}, ...]

AverageScore garde la précision complète du float (repr JSON aller-retour).
DisplayName est la seule trace durable du nom résolu selon le genre.

Tout texte illisible → DecodeError, jamais de liste partielle.
L'appelant traite DecodeError comme un cache miss.
"""
import json
from typing import Any, Iterable

from architypes.core.exceptions import DecodeError
from architypes.engine.profile.scoring import ArchetypeScore, RankedProfile

FIELDS = ("ArchetypeId", "ArchetypeName", "DisplayName", "AverageScore", "Rank")


def serialize(profile: RankedProfile) -> str:
    return json.dumps(
        [
            {
                "ArchetypeId": s.archetype_id,
                "ArchetypeName": s.archetype_name,
                "DisplayName": s.display_name,
                "AverageScore": s.average_score,
                "Rank": s.rank,
            }
            for s in profile.scores
        ],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def deserialize(text: str) -> RankedProfile:
    if not isinstance(text, str) or not text.strip():
        raise DecodeError("Empty cached result")
    try:
        records = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"Malformed cached result: {e}") from e

    if not isinstance(records, list) or not records:
        raise DecodeError("Cached result must be a non-empty array")

    return profile_from_scores(_decode_record(r) for r in records)


def profile_from_scores(scores: Iterable[ArchetypeScore]) -> RankedProfile:
    """Reconstruit le profil ; les rangs doivent être contigus 1..n dans l'ordre."""
    scores = tuple(scores)
    if not scores:
        raise DecodeError("Cached result must be a non-empty array")
    for position, score in enumerate(scores, start=1):
        if score.rank != position:
            raise DecodeError(f"Rank {score.rank} found at position {position}")
    return RankedProfile(scores=scores)


def _decode_record(record: Any) -> ArchetypeScore:
    if not isinstance(record, dict):
        raise DecodeError("Cached result entry is not an object")
    missing = [f for f in FIELDS if f not in record]
    if missing:
        raise DecodeError(f"Cached result entry missing {', '.join(missing)}")

    archetype_id = record["ArchetypeId"]
    rank = record["Rank"]
    average = record["AverageScore"]
    if not _is_int(archetype_id) or not _is_int(rank):
        raise DecodeError("ArchetypeId and Rank must be integers")
    if isinstance(average, bool) or not isinstance(average, (int, float)):
        raise DecodeError("AverageScore must be a number")
    if not isinstance(record["ArchetypeName"], str) or not isinstance(record["DisplayName"], str):
        raise DecodeError("ArchetypeName and DisplayName must be strings")

    return ArchetypeScore(
        archetype_id=archetype_id,
        archetype_name=record["ArchetypeName"],
        display_name=record["DisplayName"],
        average_score=float(average),
        rank=rank,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
