"""
Configuration du logging de l'application via loguru.

Deux sorties :
- stderr : lignes colorées, au niveau demandé (ajustable par -v / -q en CLI)
- fichier : JSON sérialisé, niveau DEBUG, avec rotation et compression

La couche domaine (hexamessage.core) ne journalise pas : seuls les cas
d'utilisation et les adaptateurs utilisent le logger.
"""

import sys
from typing import Optional

from loguru import logger

from hexamessage.config import Settings

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> {extra}"
)


def console_level_for(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Calcule le niveau console à partir des options -v/-q de la CLI.

    quiet l'emporte sur verbose. -v passe en DEBUG, -vv (ou plus) en TRACE.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return base_level


def configure_logging(settings: Settings, console_level: Optional[str] = None) -> None:
    """Configure les handlers loguru de l'application.

    Args:
        settings: Paramètres (niveau, fichier, rotation, rétention)
        console_level: Surcharge du niveau console (sinon settings.log_level)
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=console_level or settings.log_level,
        format=_CONSOLE_FORMAT,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug("Logging configuré", log_file=str(settings.log_file))
