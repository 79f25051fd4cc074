"""
WaveSeek Utilities Module

- logger: shared "WaveSeek" logger, stdout handler at DEBUG
"""
from .logger import logger, setup_logger

__all__ = ['logger', 'setup_logger']
