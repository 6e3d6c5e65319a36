# tests/test_generador_texto.py
import io
import random
import string
from unittest import mock

import pytest

from arbolscan.generador_texto import escribir_contenido_aleatorio, generar_linea, generar_palabra


def test_devuelve_bytes_y_lineas_exactos():
    destino = io.StringIO()
    bytes_escritos, lineas = escribir_contenido_aleatorio(destino, 10, rng=random.Random(7))
    contenido = destino.getvalue()
    assert bytes_escritos == len(contenido.encode("ascii"))
    assert lineas == 10
    assert contenido.count("\n") == 10
    assert contenido.endswith("\n")


def test_limites_de_palabras_y_longitud():
    destino = io.StringIO()
    escribir_contenido_aleatorio(destino, 200, max_longitud=10, max_palabras=8, rng=random.Random(3))
    for linea in destino.getvalue().splitlines():
        palabras = linea.split(" ")
        assert 1 <= len(palabras) <= 8
        for palabra in palabras:
            assert 1 <= len(palabra) <= 10
            assert set(palabra) <= set(string.ascii_lowercase)


def test_cero_lineas_no_escribe_nada():
    destino = io.StringIO()
    assert escribir_contenido_aleatorio(destino, 0) == (0, 0)
    assert destino.getvalue() == ""


def test_misma_semilla_mismo_contenido():
    a, b = io.StringIO(), io.StringIO()
    escribir_contenido_aleatorio(a, 5, rng=random.Random(42))
    escribir_contenido_aleatorio(b, 5, rng=random.Random(42))
    assert a.getvalue() == b.getvalue()


def test_error_del_destino_se_propaga():
    destino = mock.Mock()
    destino.write.side_effect = OSError("disco lleno")
    with pytest.raises(OSError):
        escribir_contenido_aleatorio(destino, 3)


def test_limites_invalidos():
    with pytest.raises(ValueError):
        escribir_contenido_aleatorio(io.StringIO(), 1, max_longitud=0)


def test_palabra_y_linea_sueltas():
    rng = random.Random(1)
    assert 1 <= len(generar_palabra(rng, 1)) <= 1
    linea = generar_linea(rng, max_palabras=1, max_longitud=3)
    assert linea.endswith("\n")
    assert " " not in linea
