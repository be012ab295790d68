"""Normalizer Daraja: callbacks M-Pesa para NormalizedPayment.

Responsabilidades:
- Dobrar arrays {Name|Key, Value} em mapas
- Extrair campos com fallback ordenado e defaults
- Despachar para o decoder do tipo de evento configurado

Tipos suportados: payment.received, stkpush.completed, b2c.completed,
b2b.completed, reversal.completed, balance.completed,
transaction.status.completed.
"""

from ._folding import fold_pairs
from .normalizer import get_decoder, normalize

__all__ = [
    "fold_pairs",
    "get_decoder",
    "normalize",
]
