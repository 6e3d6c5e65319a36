# tests/conftest.py
import logging

import pytest


@pytest.fixture
def home_aislado(tmp_path, monkeypatch):
    """HOME temporal para que las preferencias no toquen las del usuario."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def restaurar_logging():
    """Restaura los handlers del logger raíz tras llamar a configurar_logging."""
    handlers = logging.root.handlers[:]
    nivel = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    for handler in handlers:
        logging.root.addHandler(handler)
    logging.root.setLevel(nivel)
