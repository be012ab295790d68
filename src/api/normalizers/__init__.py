"""Normalizers: conversão de callbacks externos para modelos internos.

Estrutura:
- daraja/: sete decoders de callback M-Pesa e o dispatch por EventKind
"""

from .daraja import get_decoder, normalize

__all__ = [
    "get_decoder",
    "normalize",
]
