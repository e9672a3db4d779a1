# Configuration package initialization
"""
LoL Chat Tools - Configuration System

Quick Usage:
    from config import Config
    value = Config(profile='tournament').get('some.nested.key')
"""

from config.config import Config

__all__ = ['Config']
