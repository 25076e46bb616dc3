# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del sobre de cifrado simétrico autenticado.
# --------------------------------------------------------------
"""Inicializa el paquete `envelope` y reexporta su API pública."""

from envelope.crypto_sym import (
    decrypt_envelope,
    decrypt_text_with_key_hex,
    decrypt_with_key_hex,
    encrypt_with_key_hex,
    generate_key,
    generate_key_hex,
)
from envelope.errors import (
    AuthenticationFailure,
    EntropySourceUnavailable,
    EnvelopeError,
    InvalidHexEncoding,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidTagLength,
)
from envelope.models import Envelope

__all__ = [
    "AuthenticationFailure",
    "EntropySourceUnavailable",
    "Envelope",
    "EnvelopeError",
    "InvalidHexEncoding",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "InvalidTagLength",
    "decrypt_envelope",
    "decrypt_text_with_key_hex",
    "decrypt_with_key_hex",
    "encrypt_with_key_hex",
    "generate_key",
    "generate_key_hex",
]
