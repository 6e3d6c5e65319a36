# arbolscan/__init__.py
# Generador de árboles de prueba y escáner de estadísticas de directorios.

__version__ = "0.1.0"
