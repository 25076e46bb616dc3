# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan el sobre AES-GCM en formato hex."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from envelope.errors import InvalidHexEncoding, InvalidNonceLength, InvalidTagLength
from envelope.hexcodec import from_hex, from_hex_fixed, to_hex

KEY_LEN = 32
NONCE_LEN = 12
TAG_LEN = 16

_WIRE_FIELDS = ("nonceHex", "tagHex", "ciphertextHex")


class Envelope(BaseModel):
    """Representa el resultado de una operación AES-GCM en hex.

    Toda construcción (`Envelope(...)`, `model_validate`, `from_hex`,
    `from_wire`) valida el formato hex y la longitud del nonce (12 bytes) y
    de la etiqueta (16 bytes). Los errores del sobre no derivan de
    ValueError, así que pydantic los propaga sin envolverlos.

    Attributes:
        nonce_hex (str): Vector de inicialización de 96 bits (24 caracteres).
        tag_hex (str): Etiqueta de autenticación de 128 bits (32 caracteres).
        ciphertext_hex (str): Datos cifrados sin etiqueta; misma longitud que el claro.

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nonce_hex: str = Field(alias="nonceHex")
    tag_hex: str = Field(alias="tagHex")
    ciphertext_hex: str = Field(alias="ciphertextHex")

    @field_validator("nonce_hex")
    @classmethod
    def validate_nonce(cls, v: str) -> str:
        from_hex_fixed(v, NONCE_LEN, InvalidNonceLength)
        return v

    @field_validator("tag_hex")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        from_hex_fixed(v, TAG_LEN, InvalidTagLength)
        return v

    @field_validator("ciphertext_hex")
    @classmethod
    def validate_ciphertext(cls, v: str) -> str:
        from_hex(v, field="ciphertext")
        return v

    @classmethod
    def from_bytes(cls, nonce: bytes, tag: bytes, ciphertext: bytes) -> "Envelope":
        """Construye el sobre a partir de sus componentes binarios."""

        return cls(nonce_hex=to_hex(nonce), tag_hex=to_hex(tag), ciphertext_hex=to_hex(ciphertext))

    @classmethod
    def from_hex(cls, nonce_hex: str, tag_hex: str, ciphertext_hex: str) -> "Envelope":
        """Valida y construye el sobre a partir de cadenas hex.

        Args:
            nonce_hex (str): Nonce codificado en hex.
            tag_hex (str): Etiqueta codificada en hex.
            ciphertext_hex (str): Ciphertext codificado en hex.

        Returns:
            Envelope: Sobre con longitudes verificadas.

        Raises:
            InvalidHexEncoding: Si algún campo no es hex válido.
            InvalidNonceLength: Si el nonce no tiene 12 bytes.
            InvalidTagLength: Si la etiqueta no tiene 16 bytes.

        """

        return cls(nonce_hex=nonce_hex, tag_hex=tag_hex, ciphertext_hex=ciphertext_hex)

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> "Envelope":
        """Carga un sobre desde su forma de intercambio `{nonceHex, tagHex, ciphertextHex}`."""

        missing = [name for name in _WIRE_FIELDS if name not in data]
        if missing:
            raise InvalidHexEncoding(missing[0], "campo ausente")
        return cls.model_validate(dict(data))

    def to_wire(self) -> Dict[str, str]:
        """Devuelve el diccionario de intercambio con claves camelCase."""

        return self.model_dump(by_alias=True)

    @property
    def nonce(self) -> bytes:
        return bytes.fromhex(self.nonce_hex)

    @property
    def tag(self) -> bytes:
        return bytes.fromhex(self.tag_hex)

    @property
    def ciphertext(self) -> bytes:
        return bytes.fromhex(self.ciphertext_hex)
