# mottu_api/logging_factory.py

import logging

FORMATO = "%(asctime)s - %(levelname)s - %(message)s"


def configurar_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=FORMATO)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMATO))
        logger.addHandler(handler)
    return logger
