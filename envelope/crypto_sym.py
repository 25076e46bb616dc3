# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado sobre claves y sobres en hex."""

from __future__ import annotations

import logging
import os
from typing import Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from envelope.errors import (
    AuthenticationFailure,
    EntropySourceUnavailable,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidTagLength,
)
from envelope.hexcodec import from_hex, from_hex_fixed, to_hex
from envelope.models import KEY_LEN, NONCE_LEN, TAG_LEN, Envelope

__all__ = [
    "generate_key",
    "generate_key_hex",
    "encrypt_with_key_hex",
    "decrypt_with_key_hex",
    "decrypt_envelope",
    "decrypt_text_with_key_hex",
]

logger = logging.getLogger(__name__)

Plaintext = Union[bytes, bytearray, memoryview, str]


def _random_bytes(size: int) -> bytes:
    """Obtiene `size` bytes del generador seguro del sistema operativo."""

    try:
        return os.urandom(size)
    except (NotImplementedError, OSError) as exc:
        logger.critical("Fuente de entropía no disponible: %s", exc)
        raise EntropySourceUnavailable(str(exc)) from exc


def _decode_key(key_hex: str) -> bytes:
    return from_hex_fixed(key_hex, KEY_LEN, InvalidKeyLength)


def _plaintext_bytes(plaintext: Plaintext) -> bytes:
    if isinstance(plaintext, str):
        return plaintext.encode("utf-8")
    if isinstance(plaintext, (bytes, bytearray, memoryview)):
        return bytes(plaintext)
    raise TypeError(f"plaintext debe ser str o bytes, recibido {type(plaintext).__name__}")


def generate_key() -> bytes:
    """Genera una clave AES-256 aleatoria de 32 bytes."""

    return _random_bytes(KEY_LEN)


def generate_key_hex() -> str:
    """Genera una clave simétrica nueva codificada en hex.

    Returns:
        str: 64 caracteres hex en minúsculas (32 bytes aleatorios).

    Raises:
        EntropySourceUnavailable: Si el sistema no puede proporcionar entropía.

    """

    return to_hex(generate_key())


def encrypt_with_key_hex(key_hex: str, plaintext: Plaintext) -> Envelope:
    """Cifra datos con AES-256-GCM utilizando una clave proporcionada en hex.

    Args:
        key_hex (str): Clave de 32 bytes (64 caracteres hex).
        plaintext (Plaintext): Datos a cifrar; `str` se codifica en UTF-8.

    Returns:
        Envelope: Nonce, tag y ciphertext en hex. El ciphertext tiene la
        misma longitud que el claro.

    Raises:
        InvalidHexEncoding: Si la clave no es hex en minúsculas de longitud par.
        InvalidKeyLength: Si la clave no decodifica a 32 bytes.
        TypeError: Si `plaintext` no es `str` ni un objeto tipo bytes.
        EntropySourceUnavailable: Si no se puede generar el nonce.

    """

    key = _decode_key(key_hex)
    data = _plaintext_bytes(plaintext)

    nonce = _random_bytes(NONCE_LEN)
    aes = AESGCM(key)
    ct_full = aes.encrypt(nonce, data, None)
    tag = ct_full[-TAG_LEN:]
    ciphertext = ct_full[:-TAG_LEN]
    logger.debug("Sobre cifrado: %d bytes en claro", len(data))
    return Envelope.from_bytes(nonce, tag, ciphertext)


def decrypt_with_key_hex(key_hex: str, nonce_hex: str, tag_hex: str, ciphertext_hex: str) -> bytes:
    """Descifra un sobre AES-256-GCM verificando la etiqueta antes de devolver datos.

    Args:
        key_hex (str): Clave simétrica de 32 bytes en hex.
        nonce_hex (str): Vector de inicialización de 96 bits en hex.
        tag_hex (str): Etiqueta de autenticación de 128 bits en hex.
        ciphertext_hex (str): Datos cifrados sin etiqueta en hex.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        InvalidHexEncoding: Si algún argumento no es hex en minúsculas de longitud par.
        InvalidKeyLength: Si la clave no decodifica a 32 bytes.
        InvalidNonceLength: Si el nonce no decodifica a 12 bytes.
        InvalidTagLength: Si la etiqueta no decodifica a 16 bytes.
        AuthenticationFailure: Si la etiqueta no verifica.

    """

    key = _decode_key(key_hex)
    nonce = from_hex_fixed(nonce_hex, NONCE_LEN, InvalidNonceLength)
    tag = from_hex_fixed(tag_hex, TAG_LEN, InvalidTagLength)
    ciphertext = from_hex(ciphertext_hex, field="ciphertext")

    aes = AESGCM(key)
    try:
        plaintext = aes.decrypt(nonce, ciphertext + tag, None)
    except InvalidTag as exc:
        logger.warning("Verificación AES-GCM fallida (%d bytes cifrados)", len(ciphertext))
        raise AuthenticationFailure() from exc
    logger.debug("Sobre descifrado: %d bytes en claro", len(plaintext))
    return plaintext


def decrypt_envelope(key_hex: str, envelope: Envelope) -> bytes:
    """Descifra un `Envelope` con la clave dada."""

    return decrypt_with_key_hex(key_hex, envelope.nonce_hex, envelope.tag_hex, envelope.ciphertext_hex)


def decrypt_text_with_key_hex(key_hex: str, nonce_hex: str, tag_hex: str, ciphertext_hex: str) -> str:
    """Como `decrypt_with_key_hex`, pero decodifica el resultado como UTF-8."""

    return decrypt_with_key_hex(key_hex, nonce_hex, tag_hex, ciphertext_hex).decode("utf-8")
