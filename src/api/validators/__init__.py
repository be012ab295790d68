"""Validators: validação de parâmetros antes da construção do corpo.

Estrutura:
- daraja/: parâmetros obrigatórios, decimais, escolhas e identificadores
"""

__all__: list[str] = []
