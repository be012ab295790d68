"""Payload builders: construção de corpos para APIs externas.

Estrutura:
- daraja/: catálogo (resource, operation) e builders por recurso
"""

__all__: list[str] = []
