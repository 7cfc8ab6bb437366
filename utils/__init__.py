from .logger import setup_logger, configure_logging

__all__ = [
    'setup_logger',
    'configure_logging',
]
