# --------------------------------------------------------------
# File: hexcodec.py
# Description: Codificación hexadecimal estricta para claves y sobres.
# --------------------------------------------------------------
"""Conversión entre bytes y cadenas hex en minúsculas sin prefijo."""

from __future__ import annotations

import re
from typing import Optional, Type

from envelope.errors import InvalidHexEncoding, InvalidLength

__all__ = ["to_hex", "from_hex", "from_hex_fixed"]

_HEX_RE = re.compile(r"[0-9a-f]*")


def to_hex(data: bytes) -> str:
    """Devuelve la representación hex en minúsculas de `data`."""

    return bytes(data).hex()


def from_hex(value: str, *, field: str = "value") -> bytes:
    """Decodifica una cadena hex validando el formato de intercambio.

    Args:
        value (str): Texto hexadecimal en minúsculas, sin `0x`, longitud par.
        field (str): Nombre del componente, usado en el mensaje de error.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        InvalidHexEncoding: Si el valor no cumple el formato.

    """

    if not isinstance(value, str):
        raise InvalidHexEncoding(field, f"se esperaba str, recibido {type(value).__name__}")
    if value[:2] in ("0x", "0X"):
        raise InvalidHexEncoding(field, "prefijo 0x no permitido")
    if len(value) % 2:
        raise InvalidHexEncoding(field, "longitud impar")
    if _HEX_RE.fullmatch(value) is None:
        raise InvalidHexEncoding(field, "solo se admiten caracteres 0-9a-f")
    return bytes.fromhex(value)


def from_hex_fixed(
    value: str,
    length: int,
    error: Type[InvalidLength],
    *,
    field: Optional[str] = None,
) -> bytes:
    """Decodifica `value` y exige exactamente `length` bytes.

    Args:
        value (str): Cadena hex a decodificar.
        length (int): Número de bytes requerido.
        error (Type[InvalidLength]): Excepción a lanzar si la longitud no cuadra.
        field (Optional[str]): Nombre del componente; por defecto el de `error`.

    Returns:
        bytes: Bloque binario de longitud `length`.

    """

    raw = from_hex(value, field=field or error.field)
    if len(raw) != length:
        raise error(length, len(raw), field)
    return raw
