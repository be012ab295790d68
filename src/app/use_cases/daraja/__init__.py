"""Use cases específicos da Daraja (M-Pesa)."""

from .execute_operations import ExecuteOperationsUseCase
from .process_callback import acknowledge, filter_record, process_callback

__all__ = [
    # Outbound
    "ExecuteOperationsUseCase",
    # Inbound
    "acknowledge",
    "filter_record",
    "process_callback",
]
