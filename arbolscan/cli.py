# arbolscan/cli.py
import os
import argparse
import logging
from typing import List, Optional

import questionary
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import DIRECTORIO_RAIZ, ARCHIVO_MANIFIESTO, ARCHIVO_REPORTE, TOP_K
from .config_manager import cargar_config, guardar_config
from .core import configurar_logging, ejecutar_generacion, ejecutar_reporte
from .errores import ArbolScanError
from .models import ScanSummary

logger = logging.getLogger(__name__)
console = Console()


# --- Argumentos de línea de comandos ---

def _argumentos_comunes(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--raiz", metavar="DIRECTORIO", type=str, default=DIRECTORIO_RAIZ,
        help=f"Directorio raíz (por defecto: {DIRECTORIO_RAIZ})."
    )
    parser.add_argument(
        "-d", "--debug", action="store_true",
        help="Habilitar salida de depuración detallada."
    )
    parser.add_argument(
        "-i", "--interactivo", action="store_true",
        help="Abrir el menú interactivo."
    )


def crear_parser_generador() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crear-fs",
        description="Crea un árbol de directorios con archivos de texto aleatorio y un manifiesto CSV."
    )
    _argumentos_comunes(parser)
    parser.add_argument(
        "-o", "--salida", metavar="MANIFIESTO", type=str, default=ARCHIVO_MANIFIESTO,
        help=f"Ruta del manifiesto CSV (por defecto: {ARCHIVO_MANIFIESTO})."
    )
    parser.add_argument(
        "--semilla", type=int, default=None,
        help="Semilla para reproducir el mismo contenido."
    )
    return parser


def crear_parser_reporte() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reporte-fs",
        description="Escanea un árbol de directorios y escribe un reporte de tamaños."
    )
    _argumentos_comunes(parser)
    parser.add_argument(
        "-o", "--salida", metavar="REPORTE", type=str, default=ARCHIVO_REPORTE,
        help=f"Ruta del reporte de texto (por defecto: {ARCHIVO_REPORTE})."
    )
    return parser


def main_generador(argv: Optional[List[str]] = None) -> int:
    args = crear_parser_generador().parse_args(argv)
    config = cargar_config()
    configurar_logging(args.debug or config.get("default_debug_mode", False))

    if args.interactivo:
        run_interactive_cli()
        return 0

    semilla = args.semilla if args.semilla is not None else config.get("default_seed")
    try:
        ejecutar_generacion(args.raiz, args.salida, semilla=semilla)
    except ArbolScanError as e:
        logger.critical(str(e))
        return 1
    except Exception:
        logger.critical("ERROR INESPERADO DURANTE LA GENERACIÓN:", exc_info=True)
        return 1
    return 0


def main_reporte(argv: Optional[List[str]] = None) -> int:
    args = crear_parser_reporte().parse_args(argv)
    config = cargar_config()
    configurar_logging(args.debug or config.get("default_debug_mode", False))

    if args.interactivo:
        run_interactive_cli()
        return 0

    try:
        ejecutar_reporte(args.raiz, args.salida)
    except ArbolScanError as e:
        logger.critical(str(e))
        return 1
    except Exception:
        logger.critical("ERROR INESPERADO DURANTE EL ESCANEO:", exc_info=True)
        return 1
    return 0


# --- Modo interactivo ---

def mostrar_resumen(resumen: ScanSummary):
    """Muestra los totales y los rankings del escaneo como tablas."""
    console.print(f"\n[cyan]Archivos:[/cyan] {resumen.total_archivos}   "
                  f"[cyan]Directorios:[/cyan] {resumen.total_directorios}   "
                  f"[cyan]Almacenamiento:[/cyan] {resumen.total_bytes} bytes ({resumen.total_kb:.2f} KB)")

    tabla_archivos = Table(title=f"Top {TOP_K} archivos más grandes", show_header=True, header_style="bold magenta")
    tabla_archivos.add_column("#", style="dim", width=3)
    tabla_archivos.add_column("Ruta", style="yellow", overflow="fold")
    tabla_archivos.add_column("Bytes", style="green", justify="right")
    for posicion, registro in enumerate(resumen.top_archivos, start=1):
        tabla_archivos.add_row(str(posicion), registro.path, str(registro.size_bytes))
    console.print(tabla_archivos)

    tabla_dirs = Table(title="Directorios con más archivos", show_header=True, header_style="bold magenta")
    tabla_dirs.add_column("#", style="dim", width=3)
    tabla_dirs.add_column("Ruta", style="yellow", overflow="fold")
    tabla_dirs.add_column("Archivos", style="green", justify="right")
    for posicion, registro in enumerate(resumen.top_directorios, start=1):
        tabla_dirs.add_row(str(posicion), registro.path, str(registro.immediate_file_count))
    console.print(tabla_dirs)


def preguntar_directorio_raiz(config: dict) -> Optional[str]:
    ultimo = config.get("last_root_dir") or DIRECTORIO_RAIZ
    ruta = questionary.text(f"Directorio raíz (Enter para usar '{ultimo}'):", default="").ask()
    if ruta is None:  # Ctrl+C
        return None
    ruta = ruta.strip() or ultimo
    config["last_root_dir"] = ruta
    guardar_config(config)
    return ruta


def flujo_generacion():
    config = cargar_config()
    console.print(Panel("Generar árbol de prueba", style="bold green"))
    raiz = preguntar_directorio_raiz(config)
    if raiz is None:
        console.print("[yellow]Operación cancelada.[/yellow]")
        return
    if os.path.isdir(raiz):
        sobrescribir = questionary.confirm(f"'{raiz}' ya existe. Los archivos se sobrescribirán. ¿Continuar?", default=True).ask()
        if not sobrescribir:
            console.print("[yellow]Operación cancelada.[/yellow]")
            return
    try:
        manifiesto = ejecutar_generacion(raiz, ARCHIVO_MANIFIESTO, semilla=config.get("default_seed"))
        console.print(f"\n[bold green]¡{len(manifiesto)} archivos creados![/bold green]")
    except ArbolScanError as e:
        console.print(f"\n[bold red]ERROR:[/bold red] {e}")
        logger.error(str(e))


def flujo_reporte():
    config = cargar_config()
    console.print(Panel("Generar reporte de escaneo", style="bold green"))
    raiz = preguntar_directorio_raiz(config)
    if raiz is None:
        console.print("[yellow]Operación cancelada.[/yellow]")
        return
    try:
        resumen = ejecutar_reporte(raiz, ARCHIVO_REPORTE)
    except ArbolScanError as e:
        console.print(f"\n[bold red]ERROR:[/bold red] {e}")
        logger.error(str(e))
        return
    mostrar_resumen(resumen)
    console.print(f"[dim]Reporte guardado en {ARCHIVO_REPORTE}[/dim]")


def configurar_opciones():
    """Permite al usuario ver y modificar la configuración."""
    config = cargar_config()
    while True:
        console.print("\n--- Configuración Actual ---", style="bold blue")
        console.print(f"[cyan]Último directorio raíz:[/cyan] {config.get('last_root_dir')}")
        console.print(f"[cyan]Modo Debug predeterminado:[/cyan] {'Activado' if config.get('default_debug_mode') else 'Desactivado'}")
        semilla = config.get("default_seed")
        console.print(f"[cyan]Semilla predeterminada:[/cyan] {semilla if semilla is not None else 'Aleatoria'}")

        opcion = questionary.select(
            "Selecciona una opción de configuración:",
            choices=[
                questionary.Choice(title="1. Activar/Desactivar Modo Debug Predeterminado", value="debug"),
                questionary.Choice(title="2. Cambiar Semilla Predeterminada", value="seed"),
                questionary.Separator(),
                questionary.Choice(title="3. Volver al Menú Principal", value="back"),
            ],
            use_shortcuts=True
        ).ask()

        if opcion is None or opcion == "back":
            break
        elif opcion == "debug":
            config["default_debug_mode"] = not config.get("default_debug_mode", False)
            guardar_config(config)
        elif opcion == "seed":
            valor = questionary.text(
                "Nueva semilla (vacío para aleatoria):",
                validate=lambda v: v.strip() == "" or v.strip().lstrip('-').isdigit() or "Debe ser un entero."
            ).ask()
            if valor is not None:
                config["default_seed"] = int(valor) if valor.strip() else None
                guardar_config(config)


def run_interactive_cli():
    """Ejecuta el menú principal interactivo."""
    while True:
        console.print(Panel("Generador y escáner de árboles de archivos", title="Menú Principal", border_style="blue"))
        choice = questionary.select(
            "Selecciona una opción:",
            choices=[
                questionary.Choice(title="1. Generar árbol", value="generate"),
                questionary.Choice(title="2. Generar reporte", value="report"),
                questionary.Choice(title="3. Configuración", value="config"),
                questionary.Separator(),
                questionary.Choice(title="4. Salir", value="exit"),
            ],
            use_shortcuts=True
        ).ask()

        if choice == "generate":
            flujo_generacion()
        elif choice == "report":
            flujo_reporte()
        elif choice == "config":
            configurar_opciones()
        elif choice == "exit" or choice is None:
            console.print("[bold cyan]¡Hasta luego![/bold cyan]")
            break

        console.print("\n")
