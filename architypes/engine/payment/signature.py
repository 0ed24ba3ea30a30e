# engine/payment/signature.py
"""
Signature des formulaires PayFast — ZÉRO accès DB, aucun état.

Protocole imposé par la passerelle (à respecter au bit près) :
    1. On retire le champ `signature`
    2. Tri des clés par ordre ordinal
    3. key1=enc(v1)&key2=enc(v2)&...
    4. + &passphrase=enc(passphrase) si une passphrase non vide est configurée
    5. MD5 des octets UTF-8, hexadécimal minuscule

enc() = percent-encoding RFC 3986 : A-Z a-z 0-9 - _ . ~ conservés,
espace → %20, hexadécimal en majuscules.

MD5 est imposé par la passerelle — ne pas le remplacer, l'interop casserait.
"""
import hashlib
import hmac
from typing import Mapping, Optional
from urllib.parse import quote

SIGNATURE_FIELD = "signature"
PASSPHRASE_FIELD = "passphrase"


def encode_value(value: str) -> str:
    return quote(value, safe="")


def parameter_string(fields: Mapping[str, str], passphrase: Optional[str] = None) -> str:
    parts = [
        f"{key}={encode_value(fields[key])}"
        for key in sorted(fields)
        if key != SIGNATURE_FIELD
    ]
    if passphrase:
        parts.append(f"{PASSPHRASE_FIELD}={encode_value(passphrase)}")
    return "&".join(parts)


def sign(fields: Mapping[str, str], passphrase: Optional[str] = None) -> str:
    payload = parameter_string(fields, passphrase).encode("utf-8")
    return hashlib.md5(payload).hexdigest()


def verify(fields: Mapping[str, str], passphrase: Optional[str] = None) -> bool:
    """
    Recalcule la signature sur les champs reçus (hors `signature`)
    et compare, sensible à la casse, à la valeur reçue.
    """
    received = fields.get(SIGNATURE_FIELD)
    if received is None:
        return False
    expected = sign(fields, passphrase)
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
