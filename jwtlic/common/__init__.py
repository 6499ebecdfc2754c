# Common utilities
from jwtlic.common.crypto import KeyNormalizer as KeyNormalizer
from jwtlic.common.logging_utils import setup_logger as setup_logger
from jwtlic.common.mixins import Configurable as Configurable

__all__ = ["Configurable", "KeyNormalizer", "setup_logger"]
