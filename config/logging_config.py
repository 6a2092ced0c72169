# config/logging_config.py

import os
import sys
from loguru import logger

from config.settings import LOG_LEVEL, LOG_DIR

# Remove o handler padrão para evitar duplicação de logs no console.
logger.remove()

logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True
)

# Arquivo só quando CALC_LOG_DIR estiver definido: rotação a cada 10 MB, retenção de 30 dias.
if LOG_DIR:
    logger.add(
        os.path.join(LOG_DIR, "calculadora_{time}.log"),
        rotation="10 MB",
        retention="30 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    )

log = logger
