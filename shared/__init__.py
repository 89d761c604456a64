"""
Pontifex Shared Module
=======================

Common utilities, models, and configuration management shared across
the Pontifex toolkit modules.
"""

from shared.config import PontifexConfig

__all__ = ["PontifexConfig"]
