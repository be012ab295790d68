"""Connectors: adapters de borda para APIs externas.

Estrutura:
- daraja/: API Daraja (M-Pesa)
"""

__all__: list[str] = []
