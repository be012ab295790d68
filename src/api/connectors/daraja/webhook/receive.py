"""Parse inicial do corpo de callbacks Daraja (sem PII)."""

from __future__ import annotations

import json
from typing import Any


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_callback_body(raw_body: bytes) -> Any:
    """Parseia o corpo JSON do callback.

    A Daraja não assina callbacks; a autenticidade depende da URL
    registrada. Corpo vazio vira objeto vazio. Qualquer valor JSON válido
    (inclusive lista ou null) segue para o normalizer, que resolve
    estrutura ausente em defaults.

    Raises:
        InvalidJsonError: Se os bytes não forem JSON (sintaxe, encoding
            ou inteiro acima do limite de dígitos do interpretador)

    Returns:
        Valor JSON decodificado
    """
    try:
        return json.loads(raw_body or b"{}")
    except ValueError as exc:
        raise InvalidJsonError("invalid_json") from exc
