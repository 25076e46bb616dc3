# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones tipadas del sobre criptográfico.
# --------------------------------------------------------------
"""Errores que puede devolver la capa de cifrado simétrico autenticado."""

from typing import Optional

__all__ = [
    "EnvelopeError",
    "InvalidHexEncoding",
    "InvalidLength",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "InvalidTagLength",
    "AuthenticationFailure",
    "EntropySourceUnavailable",
]


class EnvelopeError(Exception):
    """Clase base de todos los fallos del sobre cifrado."""


class InvalidHexEncoding(EnvelopeError):
    """El valor no es hexadecimal en minúsculas, sin prefijo y de longitud par.

    Se comprueba antes que la longitud: una clave con caracteres no hex lanza
    este error y no `InvalidKeyLength`. Para capturar ambos usa `EnvelopeError`.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: codificación hexadecimal inválida ({reason}).")


class InvalidLength(EnvelopeError):
    """Un componente decodificado no tiene el número de bytes esperado.

    Attributes:
        field (str): Nombre del componente (key, nonce, tag).
        expected (int): Longitud requerida en bytes.
        actual (int): Longitud recibida en bytes.

    """

    field = "value"

    def __init__(self, expected: int, actual: int, field: Optional[str] = None) -> None:
        if field is not None:
            self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{self.field} debe tener {expected} bytes "
            f"({expected * 2} caracteres hex); recibidos {actual}."
        )


class InvalidKeyLength(InvalidLength):
    field = "key"


class InvalidNonceLength(InvalidLength):
    field = "nonce"


class InvalidTagLength(InvalidLength):
    field = "tag"


class AuthenticationFailure(EnvelopeError):
    """La etiqueta no verifica; no se libera ningún byte en claro."""

    def __init__(self, message: str = "La etiqueta de autenticación no es válida.") -> None:
        super().__init__(message)


class EntropySourceUnavailable(EnvelopeError):
    """La fuente de aleatoriedad segura del sistema no está disponible."""
