# --------------------------------------------------------------
# File: selftest.py
# Description: Prueba de humo del sobre AES-GCM ejecutable como módulo.
# --------------------------------------------------------------
"""Comprobación rápida de ida y vuelta y detección de manipulación."""

from __future__ import annotations

import sys
from typing import List

from pydantic import BaseModel

from envelope.config import configure_logging
from envelope.crypto_sym import decrypt_envelope, encrypt_with_key_hex, generate_key_hex
from envelope.errors import AuthenticationFailure
from envelope.models import Envelope

SAMPLE_TEXT = "hola sobre cifrado - secreto!"


class SelftestReport(BaseModel):
    """Resultado de la prueba de humo.

    Attributes:
        ok (bool): True si todas las comprobaciones pasaron.
        failures (List[str]): Descripción de cada comprobación fallida.

    """

    ok: bool
    failures: List[str] = []


def _flip_first_nibble(value: str) -> str:
    return ("1" if value[0] == "0" else "0") + value[1:]


def run_selftest() -> SelftestReport:
    """Cifra y descifra un mensaje fijo y verifica que un bit alterado se rechace."""

    failures: List[str] = []
    key_hex = generate_key_hex()
    env = encrypt_with_key_hex(key_hex, SAMPLE_TEXT)

    if decrypt_envelope(key_hex, env).decode("utf-8") != SAMPLE_TEXT:
        failures.append("roundtrip: el texto recuperado no coincide")

    tampered = Envelope.from_hex(env.nonce_hex, env.tag_hex, _flip_first_nibble(env.ciphertext_hex))
    try:
        decrypt_envelope(key_hex, tampered)
    except AuthenticationFailure:
        pass
    else:
        failures.append("tamper: se aceptó un ciphertext alterado")

    return SelftestReport(ok=not failures, failures=failures)


def main() -> int:
    configure_logging()
    print("Ejecutando prueba de humo del sobre AES-GCM...")
    report = run_selftest()
    if report.ok:
        print("OK: selftest del sobre superado")
        return 0
    for failure in report.failures:
        print(f"FALLO: {failure}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
