# config/logging_config.py

import sys

from loguru import logger

from config.settings import Config

# Remove o handler padrão para evitar duplicação de logs no console.
logger.remove()

# Handler único no stderr. O nível vem de RESCISAO_LOG_LEVEL (padrão WARNING),
# então os detalhes de cada cálculo só aparecem com DEBUG.
logger.add(
    sys.stderr,
    level=Config.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True
)

log = logger
