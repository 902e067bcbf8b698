"""Logging utilities for rsabridge modules."""

import logging

PACKAGE_LOGGERS = (
    'rsabridge',
    'rsabridge.client',
    'rsabridge.core.crypto.rsa.rsa_service',
    'rsabridge.core.crypto.rsa.rsa_key_decoder',
)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger that defers to the host's logging setup.
    
    Records propagate to the root logger. When nothing has configured
    logging yet, the logger starts at WARNING so per-call DEBUG records
    stay quiet in hosts that never opt in.
    
    Args:
        name: Logger name (typically __name__)
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    
    return logger


def set_package_level(level: int) -> None:
    """Set the level of every rsabridge logger that get_logger may have pinned."""
    for logger_name in PACKAGE_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
