"""Validadores de parâmetros para operações Daraja.

Uso:
    from api.validators.daraja import validate_required_params, MissingParameterError

    validate_required_params(spec.required, params)
"""

from api.validators.daraja.errors import (
    InvalidParameterError,
    MissingParameterError,
    UnsupportedOperationError,
)
from api.validators.daraja.params import (
    format_decimal,
    format_pull_date,
    validate_choice,
    validate_identifier_type,
)
from api.validators.daraja.required import find_missing_params, validate_required_params

__all__ = [
    "InvalidParameterError",
    "MissingParameterError",
    "UnsupportedOperationError",
    "find_missing_params",
    "format_decimal",
    "format_pull_date",
    "validate_choice",
    "validate_identifier_type",
    "validate_required_params",
]
