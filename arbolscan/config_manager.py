# arbolscan/config_manager.py
import os
import json
import logging
from typing import Dict, Any

from .config import DIRECTORIO_RAIZ

logger = logging.getLogger(__name__)  # Usa 'arbolscan.config_manager'

# Preferencias del usuario en su directorio home
CONFIG_DIR_NAME = ".arbolscan"
CONFIG_FILE_NAME = "config.json"


def obtener_ruta_config() -> str:
    """Obtiene la ruta completa al archivo de configuración."""
    home_dir = os.path.expanduser("~")
    return os.path.join(home_dir, CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def cargar_config() -> Dict[str, Any]:
    """Carga la configuración desde el archivo JSON, completando valores por defecto."""
    ruta_config = obtener_ruta_config()
    config: Dict[str, Any] = {}
    if os.path.exists(ruta_config):
        try:
            with open(ruta_config, 'r', encoding='utf-8') as f:
                config = json.load(f)
            if not isinstance(config, dict):
                logger.error(f"Formato inesperado en {ruta_config}. Se usará configuración vacía.")
                config = {}
            else:
                logger.debug(f"Configuración cargada desde: {ruta_config}")
        except json.JSONDecodeError:
            logger.error(f"Error al decodificar el archivo de configuración: {ruta_config}. Se usará configuración vacía.")
        except OSError as e:
            logger.error(f"Error al leer la configuración desde {ruta_config}: {e}")
    else:
        logger.debug(f"Archivo de configuración no encontrado en {ruta_config}.")

    config.setdefault("last_root_dir", DIRECTORIO_RAIZ)
    config.setdefault("default_debug_mode", False)
    config.setdefault("default_seed", None)
    return config


def guardar_config(config: Dict[str, Any]) -> bool:
    """Guarda la configuración en el archivo JSON. Devuelve False si falló."""
    ruta_config = obtener_ruta_config()
    try:
        os.makedirs(os.path.dirname(ruta_config), exist_ok=True)
        with open(ruta_config, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4)
        logger.debug(f"Configuración guardada en: {ruta_config}")
        return True
    except OSError as e:
        logger.error(f"Error al guardar la configuración en {ruta_config}: {e}", exc_info=True)
        return False
