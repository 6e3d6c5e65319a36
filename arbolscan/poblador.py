# arbolscan/poblador.py
import os
import random
import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from .config import (
    DIRS_POR_NIVEL, ARCHIVOS_POR_DIR, LINEAS_POR_ARCHIVO, FORMATO_FECHA
)
from .errores import ErrorCreacionRaiz
from .generador_texto import escribir_contenido_aleatorio
from .models import ManifestEntry

logger = logging.getLogger(__name__)

CallbackArchivo = Callable[[ManifestEntry], None]


def nombre_directorio(nivel: int, indice: int) -> str:
    return f"dir_l{nivel}_{indice}"


def nombre_archivo(nivel: int, indice_dir: int, indice_archivo: int) -> str:
    return f"file_l{nivel}_{indice_dir}_{indice_archivo}.txt"


def asegurar_directorio(ruta: str) -> bool:
    """Crea el directorio si no existe. Que ya exista cuenta como éxito."""
    try:
        # exist_ok=True evita errores si el directorio ya existe
        os.makedirs(ruta, exist_ok=True)
        return True
    except OSError as e:
        logger.error(f"No se pudo crear el directorio {ruta}: {e}")
        return False


def crear_archivo_aleatorio(
    ruta_archivo: str,
    num_lineas: int,
    rng: Optional[random.Random] = None
) -> Optional[ManifestEntry]:
    """
    Crea (o sobrescribe) `ruta_archivo` con texto aleatorio.
    Devuelve la entrada del manifiesto, o None si la escritura falló.
    """
    try:
        # newline='' para que el tamaño en disco coincida con los bytes contados
        with open(ruta_archivo, 'w', encoding='ascii', newline='') as f:
            marca_tiempo = datetime.now().strftime(FORMATO_FECHA)
            bytes_escritos, lineas = escribir_contenido_aleatorio(f, num_lineas, rng=rng)
    except OSError as e:
        logger.error(f"No se pudo escribir el archivo {ruta_archivo}: {e}")
        return None
    logger.debug(f"Archivo escrito: {ruta_archivo} ({bytes_escritos} bytes, {lineas} líneas)")
    return ManifestEntry(ruta_archivo, bytes_escritos, lineas, marca_tiempo)


def poblar_arbol(
    directorio_raiz: str,
    dirs_por_nivel: Sequence[int] = DIRS_POR_NIVEL,
    archivos_por_dir: int = ARCHIVOS_POR_DIR,
    lineas_por_archivo: int = LINEAS_POR_ARCHIVO,
    rng: Optional[random.Random] = None,
    al_crear_archivo: Optional[CallbackArchivo] = None
) -> List[ManifestEntry]:
    """
    Construye el árbol bajo `directorio_raiz` en profundidad.

    En cada directorio de nivel N se crean primero sus archivos y después se
    desciende a sus subdirectorios de nivel N+1. La raíz no recibe archivos.
    Si un directorio no se puede crear se omite su subárbol y se sigue con los
    hermanos; solo el fallo al crear la raíz es fatal (ErrorCreacionRaiz).

    `al_crear_archivo` se invoca con cada entrada del manifiesto en el orden de
    creación, antes de devolver la lista completa.
    """
    rng = rng or random.Random()
    manifiesto: List[ManifestEntry] = []

    if not asegurar_directorio(directorio_raiz):
        raise ErrorCreacionRaiz(f"No se pudo crear el directorio raíz '{directorio_raiz}'", directorio_raiz)

    def recorrer_nivel(ruta_padre: str, nivel: int):
        if nivel > len(dirs_por_nivel):
            return
        for indice in range(1, dirs_por_nivel[nivel - 1] + 1):
            ruta_dir = os.path.join(ruta_padre, nombre_directorio(nivel, indice))
            if not asegurar_directorio(ruta_dir):
                continue  # Se omite el subárbol completo

            for indice_archivo in range(1, archivos_por_dir + 1):
                ruta_archivo = os.path.join(ruta_dir, nombre_archivo(nivel, indice, indice_archivo))
                entrada = crear_archivo_aleatorio(ruta_archivo, lineas_por_archivo, rng)
                if entrada is None:
                    continue
                manifiesto.append(entrada)
                if al_crear_archivo:
                    al_crear_archivo(entrada)

            recorrer_nivel(ruta_dir, nivel + 1)

    logger.info(f"Poblando árbol en: {directorio_raiz} (niveles: {list(dirs_por_nivel)}, archivos por dir: {archivos_por_dir})")
    recorrer_nivel(directorio_raiz, 1)
    logger.info(f"{len(manifiesto)} archivos creados.")
    return manifiesto


def total_archivos_esperados(dirs_por_nivel: Sequence[int], archivos_por_dir: int) -> int:
    """Archivos que produce un árbol completo: archivos_por_dir por cada directorio de cada nivel."""
    total = 0
    dirs_en_nivel = 1
    for fan_out in dirs_por_nivel:
        dirs_en_nivel *= fan_out
        total += dirs_en_nivel * archivos_por_dir
    return total
