# arbolscan/escaner.py
import os
import stat
import logging
from typing import Iterator, List, Optional

from .config import MAX_ARCHIVOS, MAX_DIRECTORIOS
from .models import ColeccionAcotada, DirectoryRecord, FileRecord, ScanResult

logger = logging.getLogger(__name__)


class _DirectorioEnCurso:
    """Directorio abierto en la pila de recorrido, con su conteo local de archivos."""
    __slots__ = ("ruta", "pendientes", "archivos_locales")

    def __init__(self, ruta: str, nombres: List[str]):
        self.ruta = ruta
        self.pendientes: Iterator[str] = iter(nombres)
        self.archivos_locales = 0


def listar_entradas(ruta: str) -> Optional[List[str]]:
    """Nombres dentro de `ruta` (sin '.' ni '..'), ordenados. None si no se puede listar."""
    try:
        return sorted(os.listdir(ruta))
    except OSError as e:
        logger.error(f"No se pudo listar el directorio {ruta}: {e}")
        return None


def escanear_arbol(
    directorio_raiz: str,
    max_archivos: int = MAX_ARCHIVOS,
    max_directorios: int = MAX_DIRECTORIOS
) -> ScanResult:
    """
    Recorre `directorio_raiz` en profundidad y devuelve los registros encontrados.

    Cada subdirectorio se procesa por completo (y emite su propio registro)
    antes de cerrar el registro del padre, así que los directorios salen en
    post-orden. El conteo de cada directorio solo incluye sus archivos
    regulares directos.

    Se usa una pila explícita en lugar de recursión para no depender del
    límite de recursión con jerarquías muy profundas.

    Casos degenerados:
      - raíz inexistente, que no es directorio o sin permisos: resultado vacío.
      - subdirectorio que no se puede listar: se omite (sin registro).
      - entrada cuyo stat falla (enlace roto, etc.): se omite.
    """
    archivos: ColeccionAcotada[FileRecord] = ColeccionAcotada(max_archivos, "archivos")
    directorios: ColeccionAcotada[DirectoryRecord] = ColeccionAcotada(max_directorios, "directorios")

    nombres_raiz = listar_entradas(directorio_raiz)
    if nombres_raiz is None:
        logger.warning(f"Raíz no escaneable, el resultado estará vacío: {directorio_raiz}")
        return ScanResult([], [])

    logger.info(f"Escaneando: {directorio_raiz}")
    pila = [_DirectorioEnCurso(directorio_raiz, nombres_raiz)]
    while pila:
        actual = pila[-1]
        nombre = next(actual.pendientes, None)

        if nombre is None:
            # Todas las entradas clasificadas: ya se conoce el conteo local
            pila.pop()
            directorios.agregar(DirectoryRecord(actual.ruta, actual.archivos_locales))
            logger.debug(f"Directorio cerrado: {actual.ruta} ({actual.archivos_locales} archivos)")
            continue

        ruta_entrada = os.path.join(actual.ruta, nombre)
        try:
            info = os.stat(ruta_entrada)
        except OSError as e:
            logger.warning(f"Omitiendo {ruta_entrada}, no se pudo consultar: {e}")
            continue

        if stat.S_ISDIR(info.st_mode):
            nombres_hijo = listar_entradas(ruta_entrada)
            if nombres_hijo is not None:
                pila.append(_DirectorioEnCurso(ruta_entrada, nombres_hijo))
        elif stat.S_ISREG(info.st_mode):
            archivos.agregar(FileRecord(ruta_entrada, info.st_size))
            actual.archivos_locales += 1
        else:
            logger.debug(f"Ignorando entrada especial: {ruta_entrada}")

    logger.info(f"Escaneo terminado: {len(archivos)} archivos, {len(directorios)} directorios.")
    return ScanResult(
        archivos.como_lista(),
        directorios.como_lista(),
        archivos.descartados,
        directorios.descartados
    )
