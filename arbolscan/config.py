# arbolscan/config.py

# --- Constantes del Generador ---
DIRECTORIO_RAIZ = "example_root"
DIRS_POR_NIVEL = (2, 2, 2)  # Fan-out de los niveles 1, 2 y 3
ARCHIVOS_POR_DIR = 2
LINEAS_POR_ARCHIVO = 10

MAX_PALABRAS_LINEA = 8
MAX_LONGITUD_PALABRA = 10

FORMATO_FECHA = "%Y-%m-%d %H:%M:%S"

# --- Archivos de Salida ---
ARCHIVO_MANIFIESTO = "summary.csv"
CABECERA_MANIFIESTO = ("file_path", "size_bytes", "line_count", "creation_time")
ARCHIVO_REPORTE = "file_system_report.txt"

# --- Constantes del Escáner ---
MAX_ARCHIVOS = 1000
MAX_DIRECTORIOS = 500
TOP_K = 5
