"""
Utility modules for the rendering engine.
"""

from render_engine.utils.config import Config
from render_engine.utils.logging import setup_logging, StageTimer

__all__ = [
    'Config',
    'setup_logging',
    'StageTimer',
]
