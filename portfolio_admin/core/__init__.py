"""
Portfolio Admin Core
====================

Configuration and logging shared by the client, forms and admin modules.
"""

from .config import Config, get_config_value
from .logging_service import LoggingService, logger

__all__ = ['Config', 'get_config_value', 'LoggingService', 'logger']
