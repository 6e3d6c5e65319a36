# arbolscan/agregador.py
import heapq
import logging
from typing import Iterable, List

from .config import TOP_K
from .models import DirectoryRecord, FileRecord, ScanResult, ScanSummary

logger = logging.getLogger(__name__)


def calcular_total_bytes(archivos: Iterable[FileRecord]) -> int:
    return sum(registro.size_bytes for registro in archivos)


def top_archivos_por_tamano(archivos: List[FileRecord], k: int = TOP_K) -> List[FileRecord]:
    # nlargest equivale a sorted(..., reverse=True)[:k]: estable en empates
    return heapq.nlargest(k, archivos, key=lambda registro: registro.size_bytes)


def top_directorios_por_archivos(directorios: List[DirectoryRecord], k: int = TOP_K) -> List[DirectoryRecord]:
    return heapq.nlargest(k, directorios, key=lambda registro: registro.immediate_file_count)


def resumir_escaneo(resultado: ScanResult, k: int = TOP_K) -> ScanSummary:
    """Totales y rankings top-k de un escaneo."""
    if k < 0:
        raise ValueError(f"k debe ser >= 0 (recibido {k})")
    total_bytes = calcular_total_bytes(resultado.archivos)
    logger.debug(f"Total almacenamiento: {total_bytes} bytes en {len(resultado.archivos)} archivos")
    return ScanSummary(
        total_archivos=len(resultado.archivos),
        total_directorios=len(resultado.directorios),
        total_bytes=total_bytes,
        top_archivos=top_archivos_por_tamano(resultado.archivos, k),
        top_directorios=top_directorios_por_archivos(resultado.directorios, k),
        archivos_descartados=resultado.archivos_descartados,
        directorios_descartados=resultado.directorios_descartados
    )
