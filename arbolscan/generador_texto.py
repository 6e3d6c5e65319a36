# arbolscan/generador_texto.py
import random
import string
from typing import Optional, TextIO, Tuple

from .config import MAX_PALABRAS_LINEA, MAX_LONGITUD_PALABRA

LETRAS = string.ascii_lowercase


def generar_palabra(rng: random.Random, max_longitud: int = MAX_LONGITUD_PALABRA) -> str:
    """Palabra en minúsculas de longitud 1..max_longitud."""
    longitud = rng.randint(1, max_longitud)
    return ''.join(rng.choice(LETRAS) for _ in range(longitud))


def generar_linea(
    rng: random.Random,
    max_palabras: int = MAX_PALABRAS_LINEA,
    max_longitud: int = MAX_LONGITUD_PALABRA
) -> str:
    """Línea de 1..max_palabras palabras separadas por un espacio, terminada en '\\n'."""
    num_palabras = rng.randint(1, max_palabras)
    palabras = [generar_palabra(rng, max_longitud) for _ in range(num_palabras)]
    return ' '.join(palabras) + '\n'


def escribir_contenido_aleatorio(
    destino: TextIO,
    num_lineas: int,
    max_longitud: int = MAX_LONGITUD_PALABRA,
    max_palabras: int = MAX_PALABRAS_LINEA,
    rng: Optional[random.Random] = None
) -> Tuple[int, int]:
    """
    Escribe `num_lineas` líneas aleatorias en `destino`.

    Devuelve (bytes_escritos, lineas_escritas). El contenido es ASCII, así que
    cada carácter cuenta como un byte. Si el destino rechaza una escritura se
    propaga el OSError tal cual.
    """
    if max_longitud < 1 or max_palabras < 1:
        raise ValueError("Los límites de palabras y longitud deben ser >= 1")
    rng = rng or random.Random()

    bytes_escritos = 0
    lineas_escritas = 0
    for _ in range(num_lineas):
        linea = generar_linea(rng, max_palabras, max_longitud)
        destino.write(linea)
        bytes_escritos += len(linea)
        lineas_escritas += 1
    return bytes_escritos, lineas_escritas
