# arbolscan/models.py
# Estructuras de datos compartidas por el generador y el escáner
import logging
from typing import NamedTuple, List, Generic, TypeVar, Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FileRecord(NamedTuple):
    path: str
    size_bytes: int


class DirectoryRecord(NamedTuple):
    path: str
    immediate_file_count: int  # Solo archivos regulares directamente dentro


class ManifestEntry(NamedTuple):
    file_path: str
    size_bytes: int
    line_count: int
    creation_time: str  # YYYY-MM-DD HH:MM:SS, hora local


class ColeccionAcotada(Generic[T]):
    """
    Secuencia ordenada con capacidad máxima.

    Las entradas que llegan con la colección llena se descartan (no es un error):
    se cuentan en `descartados` y se avisa una sola vez por log.
    El orden de inserción es el orden de recorrido.
    """

    def __init__(self, capacidad: int, nombre: str = "coleccion"):
        if capacidad < 0:
            raise ValueError(f"Capacidad inválida: {capacidad}")
        self.capacidad = capacidad
        self.nombre = nombre
        self.descartados = 0
        self._items: List[T] = []

    def agregar(self, item: T) -> bool:
        """Añade `item` si hay hueco. Devuelve False si se descartó."""
        if len(self._items) >= self.capacidad:
            if self.descartados == 0:
                logger.warning(f"Capacidad de {self.nombre} alcanzada ({self.capacidad}); se descartan las entradas restantes.")
            self.descartados += 1
            return False
        self._items.append(item)
        return True

    @property
    def llena(self) -> bool:
        return len(self._items) >= self.capacidad

    def como_lista(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, indice):
        return self._items[indice]


class ScanResult(NamedTuple):
    archivos: List[FileRecord]
    directorios: List[DirectoryRecord]
    archivos_descartados: int = 0
    directorios_descartados: int = 0


class ScanSummary(NamedTuple):
    total_archivos: int
    total_directorios: int
    total_bytes: int
    top_archivos: List[FileRecord]
    top_directorios: List[DirectoryRecord]
    archivos_descartados: int = 0
    directorios_descartados: int = 0

    @property
    def total_kb(self) -> float:
        return self.total_bytes / 1024.0
