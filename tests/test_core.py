# tests/test_core.py
import csv
import os

import pytest

from arbolscan.core import ejecutar_generacion, ejecutar_reporte
from arbolscan.errores import ErrorAperturaManifiesto, ErrorAperturaReporte, ErrorCreacionRaiz


def test_generacion_escribe_manifiesto_en_orden(tmp_path, capsys):
    raiz = str(tmp_path / "example_root")
    manifiesto_csv = str(tmp_path / "summary.csv")

    entradas = ejecutar_generacion(raiz, manifiesto_csv, semilla=11)

    with open(manifiesto_csv, newline="", encoding="utf-8") as f:
        filas = list(csv.reader(f))
    assert filas[0] == ["file_path", "size_bytes", "line_count", "creation_time"]
    assert len(filas) == 1 + 28
    assert [fila[0] for fila in filas[1:]] == [e.file_path for e in entradas]
    for fila in filas[1:]:
        assert int(fila[1]) == os.path.getsize(fila[0])
        assert fila[2] == "10"

    salida = capsys.readouterr().out
    assert sum(1 for linea in salida.splitlines() if linea.startswith("Creado ")) == 28
    assert "Manifiesto guardado en" in salida


def test_generacion_con_semilla_es_reproducible(tmp_path):
    a = ejecutar_generacion(str(tmp_path / "a"), str(tmp_path / "a.csv"), dirs_por_nivel=(1, 1), semilla=3)
    b = ejecutar_generacion(str(tmp_path / "b"), str(tmp_path / "b.csv"), dirs_por_nivel=(1, 1), semilla=3)
    assert [e.size_bytes for e in a] == [e.size_bytes for e in b]


def test_manifiesto_no_abrible_es_fatal(tmp_path):
    raiz = tmp_path / "example_root"
    with pytest.raises(ErrorAperturaManifiesto):
        ejecutar_generacion(str(raiz), str(tmp_path / "no_existe" / "summary.csv"))
    assert not raiz.exists()


def test_raiz_no_creable_es_fatal(tmp_path):
    ocupado = tmp_path / "ocupado"
    ocupado.write_text("x")
    with pytest.raises(ErrorCreacionRaiz):
        ejecutar_generacion(str(ocupado), str(tmp_path / "summary.csv"))
    # La cabecera ya se había escrito
    assert (tmp_path / "summary.csv").read_text().startswith("file_path,")


def test_reporte_de_arbol_generado(tmp_path, capsys):
    raiz = str(tmp_path / "example_root")
    ejecutar_generacion(raiz, str(tmp_path / "summary.csv"), semilla=1)
    capsys.readouterr()

    ruta_reporte = tmp_path / "file_system_report.txt"
    resumen = ejecutar_reporte(raiz, str(ruta_reporte))

    texto = ruta_reporte.read_text(encoding="utf-8")
    assert "Total files found: 28" in texto
    assert "Total directories found: 15" in texto
    assert f"Total storage used: {resumen.total_bytes} bytes" in texto
    assert len(resumen.top_archivos) == 5
    assert all(d.immediate_file_count == 2 for d in resumen.top_directorios)

    salida = capsys.readouterr().out
    assert f"Total de archivos escaneados: 28, Almacenamiento total: {resumen.total_bytes} bytes" in salida


def test_reporte_de_raiz_inexistente_tiene_ceros(tmp_path):
    ruta_reporte = tmp_path / "reporte.txt"
    resumen = ejecutar_reporte(str(tmp_path / "no_existe"), str(ruta_reporte))
    assert (resumen.total_archivos, resumen.total_directorios, resumen.total_bytes) == (0, 0, 0)
    texto = ruta_reporte.read_text(encoding="utf-8")
    assert "Total files found: 0" in texto
    assert "Total storage used: 0 bytes (0.00 KB)" in texto


def test_reporte_no_abrible_es_fatal(tmp_path):
    with pytest.raises(ErrorAperturaReporte) as info:
        ejecutar_reporte(str(tmp_path), str(tmp_path / "no_existe" / "r.txt"))
    assert info.value.ruta.endswith("r.txt")
