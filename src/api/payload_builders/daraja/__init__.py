"""Builders de payload para a API Daraja (M-Pesa).

Este pacote contém um builder por recurso e o catálogo que os liga aos
endpoints. O ponto de entrada é `encode`.
"""

from api.payload_builders.daraja.catalog import (
    OPERATION_CATALOG,
    SUPPORTED_OPERATIONS,
    OperationSpec,
    catalog_key,
    get_operation_spec,
    validate_catalog,
)
from api.payload_builders.daraja.factory import encode
from api.payload_builders.daraja.password import derive_password

__all__ = [
    "OPERATION_CATALOG",
    "SUPPORTED_OPERATIONS",
    "OperationSpec",
    "catalog_key",
    "derive_password",
    "encode",
    "get_operation_spec",
    "validate_catalog",
]
