from codeflat.logging.factory import DefaultLoggerFactory
from codeflat.logging.helpers import JsonLogFormatter, get_logger, setup_base_logger

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'setup_base_logger',
]
