"""
Logging and environment helpers used by the command line tool and the
HTTP handler.
"""
import os
import logging
from typing import Any, Optional


def get_env_var(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.
    
    Args:
        key: Environment variable key
        default: Optional default value
        
    Returns:
        Environment variable value
        
    Raises:
        ValueError: If variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(f"Environment variable {key} is required but not set")
    return value


def setup_logger(logger_name: str) -> logging.Logger:
    """
    Attach one formatted stream handler to a logger.
    
    The level is read from LOG_LEVEL (INFO when unset).
    
    Args:
        logger_name: Name of the logger
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(get_env_var('LOG_LEVEL', 'INFO').upper())
    
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        logger.addHandler(handler)
    
    return logger


def parse_bool(value: Any) -> bool:
    """
    Interpret a flag given as a bool or as text ('true', '1', 'yes', ...).
    
    Raises:
        ValueError: If the text is not a recognised flag value
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('true', '1', 'yes', 'on'):
        return True
    if text in ('false', '0', 'no', 'off'):
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
