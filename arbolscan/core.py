# arbolscan/core.py
import random
import logging
from typing import List, Optional, Sequence

from rich.console import Console

from .config import (
    DIRECTORIO_RAIZ, DIRS_POR_NIVEL, ARCHIVOS_POR_DIR, LINEAS_POR_ARCHIVO,
    ARCHIVO_MANIFIESTO, ARCHIVO_REPORTE, MAX_ARCHIVOS, MAX_DIRECTORIOS, TOP_K
)
from .errores import ErrorAperturaManifiesto, ErrorAperturaReporte
from .poblador import poblar_arbol
from .escaner import escanear_arbol
from .agregador import resumir_escaneo
from .reporte import EscritorManifiesto, generar_reporte_texto, linea_resumen_consola
from .models import ManifestEntry, ScanSummary

logger = logging.getLogger(__name__)  # Usa 'arbolscan.core'
console = Console()

FORMATO_LOG = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'


def configurar_logging(debug_mode: bool):
    """Configura el logger raíz (stderr) según el modo debug."""
    log_level = logging.DEBUG if debug_mode else logging.INFO
    # basicConfig solo actúa la primera vez: quitar handlers previos
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=log_level, format=FORMATO_LOG)
    if debug_mode:
        logger.debug("Modo Debug HABILITADO.")


def ejecutar_generacion(
    directorio_raiz: str = DIRECTORIO_RAIZ,
    ruta_manifiesto: str = ARCHIVO_MANIFIESTO,
    dirs_por_nivel: Sequence[int] = DIRS_POR_NIVEL,
    archivos_por_dir: int = ARCHIVOS_POR_DIR,
    lineas_por_archivo: int = LINEAS_POR_ARCHIVO,
    semilla: Optional[int] = None
) -> List[ManifestEntry]:
    """
    Pipeline del generador: abre el manifiesto, puebla el árbol y escribe una
    fila por archivo creado, en orden de creación.

    Errores fatales: ErrorAperturaManifiesto, ErrorCreacionRaiz.
    """
    # Sin semilla, random.Random se inicializa desde el sistema (una vez por ejecución)
    rng = random.Random(semilla)
    if semilla is not None:
        logger.info(f"Usando semilla fija: {semilla}")

    try:
        f_manifiesto = open(ruta_manifiesto, 'w', encoding='utf-8', newline='')
    except OSError as e:
        raise ErrorAperturaManifiesto(f"No se pudo abrir el manifiesto '{ruta_manifiesto}': {e}", ruta_manifiesto) from e

    with f_manifiesto:
        escritor = EscritorManifiesto(f_manifiesto)
        escritor.escribir_cabecera()

        def registrar_archivo(entrada: ManifestEntry):
            escritor.escribir_entrada(entrada)
            console.print(
                f"Creado {entrada.file_path} ({entrada.size_bytes} bytes, {entrada.line_count} líneas)",
                markup=False, highlight=False, soft_wrap=True
            )

        manifiesto = poblar_arbol(
            directorio_raiz,
            dirs_por_nivel=dirs_por_nivel,
            archivos_por_dir=archivos_por_dir,
            lineas_por_archivo=lineas_por_archivo,
            rng=rng,
            al_crear_archivo=registrar_archivo
        )

    console.print(f"Manifiesto guardado en {ruta_manifiesto}", markup=False, highlight=False, soft_wrap=True)
    logger.info(f"Manifiesto con {escritor.filas} filas: {ruta_manifiesto}")
    return manifiesto


def ejecutar_reporte(
    directorio_raiz: str = DIRECTORIO_RAIZ,
    ruta_reporte: str = ARCHIVO_REPORTE,
    k: int = TOP_K,
    max_archivos: int = MAX_ARCHIVOS,
    max_directorios: int = MAX_DIRECTORIOS
) -> ScanSummary:
    """
    Pipeline del escáner: escanea la raíz, agrega y escribe el reporte.

    Una raíz inexistente produce un reporte con ceros. Solo es fatal no poder
    abrir el reporte (ErrorAperturaReporte).
    """
    try:
        f_reporte = open(ruta_reporte, 'w', encoding='utf-8')
    except OSError as e:
        raise ErrorAperturaReporte(f"No se pudo abrir el reporte '{ruta_reporte}': {e}", ruta_reporte) from e

    with f_reporte:
        resultado = escanear_arbol(directorio_raiz, max_archivos, max_directorios)
        resumen = resumir_escaneo(resultado, k)
        f_reporte.write(generar_reporte_texto(resumen, k))
    logger.info(f"Reporte guardado en: {ruta_reporte}")

    console.print(linea_resumen_consola(resumen), markup=False, highlight=False, soft_wrap=True)
    return resumen
