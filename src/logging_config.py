"""
Configuration du logging via loguru.

Les appels de log du service passent leur contexte en arguments nommes
(url, imdb_id, operation, elapsed...). Loguru les range dans record["extra"] :
- la console les affiche en fin de ligne (cle=valeur)
- le fichier les conserve tels quels dans le JSON serialise
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _console_format(record) -> str:
    """Format console : message suivi du contexte (cle=valeur)."""
    if not record["extra"]:
        return CONSOLE_FORMAT + "\n{exception}"
    context = " ".join(f"{key}={{extra[{key}]}}" for key in record["extra"])
    return CONSOLE_FORMAT + f" <dim>{context}</dim>\n{{exception}}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/imdb-scraper.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les handlers console et fichier.

    Args :
        log_level : Niveau minimum de la console (le fichier capture tout des DEBUG)
        log_file : Fichier JSON de l'historique des extractions
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre de fichiers conserves apres rotation
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=_console_format, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        # Les extractions concurrentes journalisent depuis la boucle asyncio
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), console_level=log_level)
