# arbolscan/reporte.py
# Formato de los archivos de salida: reporte de texto plano y manifiesto CSV
import csv
from typing import TextIO

from .config import CABECERA_MANIFIESTO, TOP_K
from .models import ManifestEntry, ScanSummary


def generar_reporte_texto(resumen: ScanSummary, k: int = TOP_K) -> str:
    """Genera el texto completo del reporte del escaneo."""
    lineas = [
        "   FILE SYSTEM REPORT",
        f"Total files found: {resumen.total_archivos}",
        f"Total directories found: {resumen.total_directorios}",
        f"Total storage used: {resumen.total_bytes} bytes ({resumen.total_kb:.2f} KB)",
    ]
    if resumen.archivos_descartados or resumen.directorios_descartados:
        lineas.append(
            f"Entries dropped (capacity reached): {resumen.archivos_descartados} files, "
            f"{resumen.directorios_descartados} directories"
        )
    lineas.append("")

    lineas.append(f"Top {k} Largest Files:")
    for posicion, registro in enumerate(resumen.top_archivos, start=1):
        lineas.append(f"{posicion}. {registro.path} - {registro.size_bytes} bytes")

    lineas.append("")
    lineas.append("Directories with Most Files:")
    for posicion, registro in enumerate(resumen.top_directorios, start=1):
        lineas.append(f"{posicion}. {registro.path} - {registro.immediate_file_count} files")

    return "\n".join(lineas) + "\n"


def linea_resumen_consola(resumen: ScanSummary) -> str:
    return f"Total de archivos escaneados: {resumen.total_archivos}, Almacenamiento total: {resumen.total_bytes} bytes"


class EscritorManifiesto:
    """Escribe el manifiesto CSV fila a fila, volcando cada fila al disco."""

    def __init__(self, destino: TextIO):
        self._destino = destino
        self._writer = csv.writer(destino, lineterminator="\n")
        self.filas = 0

    def escribir_cabecera(self):
        self._writer.writerow(CABECERA_MANIFIESTO)
        self._destino.flush()

    def escribir_entrada(self, entrada: ManifestEntry):
        self._writer.writerow([entrada.file_path, entrada.size_bytes, entrada.line_count, entrada.creation_time])
        self._destino.flush()
        self.filas += 1
