"""Pytest configuration to make the local packages importable without installation."""
import logging
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import ConfigurationManager
from invoice_fields.utils.logger import ROOT_LOGGER_NAME

SAMPLE_INVOICE = """Instalaciones Climatización del Sur S.L.
CIF B12345678 - Tel. 954 123 456
Calle Feria 12, 41003 Sevilla
FACTURA Nº FAC-2024-0123
Fecha: 01/03/2024
Vencimiento: 31/03/2024
Cliente: Comunidad de Propietarios Los Olivos
Concepto: Reparación de equipo de aire acondicionado
Base imponible: 1.000,00 €
IVA 21%: 210,00 €
Total: 1.210,00 €
"""


@pytest.fixture(autouse=True)
def reset_configuration():
    """Give every test a fresh configuration singleton."""

    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logger() so later tests can capture records with caplog."""

    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_invoice_text() -> str:
    """Return the text of a complete HVAC repair invoice."""

    return SAMPLE_INVOICE


@pytest.fixture
def scenario_text() -> str:
    """Return the minimal invoice used for the reconciliation scenario."""

    return "FACTURA Nº FAC-2024-0123\nFecha: 01/03/2024\nTotal 121,00 €\nBase 100,00 €"
