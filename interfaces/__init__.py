# -*- coding: utf-8 -*-
"""
LocForge Interfaces Package

Abstract base classes that translation engines implement.
"""

from interfaces.i_plugin import IPlugin, ITranslationEngine

__all__ = [
    'IPlugin',
    'ITranslationEngine',
]
