"""Derivação de senha Lipa na M-Pesa Online (STK Push)."""

from __future__ import annotations

import base64


def derive_password(shortcode: str, passkey: str, timestamp: str) -> str:
    """Deriva a senha exigida pelo STK Push.

    password = base64(shortcode + passkey + timestamp)

    Args:
        shortcode: Business shortcode
        passkey: Passkey do shortcode
        timestamp: Timestamp de 14 dígitos enviado no mesmo corpo

    Returns:
        Senha em base64 (ASCII)
    """
    raw = f"{shortcode}{passkey}{timestamp}".encode()
    return base64.b64encode(raw).decode("ascii")
