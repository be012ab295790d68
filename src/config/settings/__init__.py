"""Agregador de settings do daraja_bridge.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Integration settings
from config.settings.daraja import (
    DARAJA_BASE_URLS,
    DarajaSettings,
    get_daraja_settings,
)

__all__ = [
    # Constants
    "DARAJA_BASE_URLS",
    # Base
    "BaseSettings",
    # Daraja
    "DarajaSettings",
    "Environment",
    "get_base_settings",
    "get_daraja_settings",
]
