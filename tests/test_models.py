# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas del modelo Envelope y su forma de intercambio.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from envelope.crypto_sym import decrypt_envelope, encrypt_with_key_hex
from envelope.errors import InvalidHexEncoding, InvalidNonceLength, InvalidTagLength
from envelope.models import Envelope


def test_to_wire_uses_camel_case_keys(key_hex):
    """El sobre se serializa con las claves nonceHex, tagHex y ciphertextHex.

    Args:
        key_hex (str): Clave aleatoria proporcionada por el fixture.

    Returns:
        None: Las aserciones revisan el diccionario de intercambio.
    """
    env = encrypt_with_key_hex(key_hex, b"abc")
    wire = env.to_wire()
    assert set(wire) == {"nonceHex", "tagHex", "ciphertextHex"}
    assert wire["nonceHex"] == env.nonce_hex


def test_from_wire_roundtrip(key_hex):
    """Un sobre recargado desde su forma de intercambio sigue descifrando."""
    env = encrypt_with_key_hex(key_hex, b"payload")
    loaded = Envelope.from_wire(env.to_wire())
    assert loaded == env
    assert decrypt_envelope(key_hex, loaded) == b"payload"


def test_from_wire_missing_field():
    """Un campo ausente se reporta como codificación inválida."""
    with pytest.raises(InvalidHexEncoding) as info:
        Envelope.from_wire({"nonceHex": "00" * 12, "tagHex": "00" * 16})
    assert info.value.field == "ciphertextHex"


def test_from_hex_validates_lengths():
    """Las longitudes de nonce y tag forman parte del contrato del tipo."""
    with pytest.raises(InvalidNonceLength) as info:
        Envelope.from_hex("00" * 11, "00" * 16, "")
    assert (info.value.expected, info.value.actual) == (12, 11)
    with pytest.raises(InvalidTagLength):
        Envelope.from_hex("00" * 12, "00" * 15, "")


def test_from_bytes_exposes_binary_views():
    """Las propiedades binarias reflejan los campos hex."""
    env = Envelope.from_bytes(b"\x01" * 12, b"\x02" * 16, b"\xff\x00")
    assert env.nonce == b"\x01" * 12
    assert env.tag == b"\x02" * 16
    assert env.ciphertext_hex == "ff00"


def test_envelope_is_frozen(key_hex):
    """El sobre es inmutable una vez construido."""
    env = encrypt_with_key_hex(key_hex, b"x")
    with pytest.raises(ValidationError):
        env.nonce_hex = "00" * 12


def test_model_validate_rejects_malformed_hex():
    """`model_validate` aplica las mismas reglas que `from_wire`.

    Returns:
        None: Se espera un error tipado del sobre, no un objeto inválido.
    """
    with pytest.raises(InvalidHexEncoding) as info:
        Envelope.model_validate({"nonceHex": "ZZ", "tagHex": "", "ciphertextHex": "0x1"})
    assert info.value.field == "nonce"


def test_direct_construction_validates_lengths():
    """Construir el modelo directamente también verifica nonce, tag y ciphertext."""
    with pytest.raises(InvalidNonceLength):
        Envelope(nonce_hex="00", tag_hex="00" * 16, ciphertext_hex="")
    with pytest.raises(InvalidTagLength):
        Envelope(nonce_hex="00" * 12, tag_hex="00", ciphertext_hex="")
    with pytest.raises(InvalidHexEncoding) as info:
        Envelope(nonce_hex="00" * 12, tag_hex="00" * 16, ciphertext_hex="abc")
    assert info.value.field == "ciphertext"
