# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para las pruebas del sobre cifrado.
# --------------------------------------------------------------

import logging
from typing import Iterator

import pytest

from envelope.crypto_sym import generate_key_hex

ZERO_KEY_HEX = "00" * 32


@pytest.fixture
def key_hex() -> str:
    """Proporciona una clave aleatoria nueva para cada prueba.

    Returns:
        str: Clave de 32 bytes codificada en hex.
    """
    return generate_key_hex()


@pytest.fixture
def zero_key_hex() -> str:
    """Clave fija de 32 bytes a cero usada en el escenario de referencia."""
    return ZERO_KEY_HEX


@pytest.fixture(autouse=True)
def _reset_envelope_logger() -> Iterator[None]:
    """Restaura handlers y nivel del logger `envelope` tras cada prueba.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    logger = logging.getLogger("envelope")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
