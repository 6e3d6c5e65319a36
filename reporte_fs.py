# reporte_fs.py
# Lanzador del escáner: recorre el árbol y escribe file_system_report.txt
import sys


def verificar_dependencias():
    """Verifica dependencias externas."""
    try:
        import rich
        import questionary
    except ImportError as e_dep:
        print(f"ERROR: Dependencia externa '{e_dep.name}' no encontrada.", file=sys.stderr)
        print("Por favor, instala las dependencias ejecutando:", file=sys.stderr)
        print("pip install -r requirements.txt", file=sys.stderr)
        sys.exit(1)


def main():
    verificar_dependencias()
    from arbolscan.cli import main_reporte
    sys.exit(main_reporte())


if __name__ == "__main__":
    main()
