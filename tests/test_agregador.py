# tests/test_agregador.py
import pytest

from arbolscan.agregador import (
    calcular_total_bytes, resumir_escaneo, top_archivos_por_tamano, top_directorios_por_archivos
)
from arbolscan.models import DirectoryRecord, FileRecord, ScanResult


def test_total_vacio_es_cero():
    assert calcular_total_bytes([]) == 0


def test_top_archivos_descendente_y_estable():
    archivos = [
        FileRecord("a", 10), FileRecord("b", 30), FileRecord("c", 10),
        FileRecord("d", 30), FileRecord("e", 5), FileRecord("f", 10),
    ]
    top = top_archivos_por_tamano(archivos, 5)
    assert [r.path for r in top] == ["b", "d", "a", "c", "f"]


def test_top_con_menos_elementos_que_k():
    directorios = [DirectoryRecord("x", 1), DirectoryRecord("y", 3)]
    assert top_directorios_por_archivos(directorios, 5) == [DirectoryRecord("y", 3), DirectoryRecord("x", 1)]


def test_top_directorios_empates_en_orden_de_descubrimiento():
    directorios = [DirectoryRecord(str(i), 2) for i in range(7)]
    assert [d.path for d in top_directorios_por_archivos(directorios, 5)] == ["0", "1", "2", "3", "4"]


def test_tamanos_enormes_no_desbordan():
    grande = 2 ** 63 + 17
    archivos = [FileRecord("pequeno", 1), FileRecord("enorme", grande), FileRecord("vacio", 0)]
    top = top_archivos_por_tamano(archivos, 5)
    assert top[0] == FileRecord("enorme", grande)
    assert calcular_total_bytes(archivos) == grande + 1


def test_resumen_completo():
    resultado = ScanResult(
        archivos=[FileRecord("r/a.txt", 100), FileRecord("r/sub/b.txt", 50)],
        directorios=[DirectoryRecord("r/sub", 1), DirectoryRecord("r", 1)],
        archivos_descartados=2,
    )
    resumen = resumir_escaneo(resultado)
    assert resumen.total_archivos == 2
    assert resumen.total_directorios == 2
    assert resumen.total_bytes == 150
    assert resumen.total_kb == pytest.approx(150 / 1024)
    assert resumen.top_archivos[0].path == "r/a.txt"
    assert [d.path for d in resumen.top_directorios] == ["r/sub", "r"]
    assert resumen.archivos_descartados == 2


def test_rankings_ordenados_y_longitud_min_k():
    archivos = [FileRecord(str(i), (i * 37) % 11) for i in range(20)]
    directorios = [DirectoryRecord(str(i), (i * 7) % 5) for i in range(3)]
    resumen = resumir_escaneo(ScanResult(archivos, directorios), k=5)
    tamanos = [r.size_bytes for r in resumen.top_archivos]
    assert tamanos == sorted(tamanos, reverse=True)
    assert len(resumen.top_archivos) == 5
    assert len(resumen.top_directorios) == 3
    conteos = [d.immediate_file_count for d in resumen.top_directorios]
    assert conteos == sorted(conteos, reverse=True)


def test_resumen_vacio():
    resumen = resumir_escaneo(ScanResult([], []))
    assert (resumen.total_archivos, resumen.total_directorios, resumen.total_bytes) == (0, 0, 0)
    assert resumen.top_archivos == [] and resumen.top_directorios == []


def test_k_negativo():
    with pytest.raises(ValueError):
        resumir_escaneo(ScanResult([], []), k=-1)
