"""
Huella (fingerprint) del contenido de una unit.

Es el único mecanismo para detectar drift, así que opera sobre los bytes
exactos del texto: sin normalizar espacios ni finales de línea.
"""

import hashlib


def fingerprint(content: str) -> str:
    """SHA-256 en hexadecimal (64 caracteres) del contenido UTF-8."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
