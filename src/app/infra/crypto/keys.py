"""Carregamento da chave pública do certificado Daraja."""

from __future__ import annotations

from typing import Any

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from .errors import CredentialCryptoError

_CERTIFICATE_MARKER = "BEGIN CERTIFICATE"


def load_public_key(pem: str) -> Any:
    """Carrega chave pública RSA de um certificado X.509 ou PEM de chave pública.

    A Safaricom distribui o certificado (sandbox ou produção); a chave
    pública dele cifra a senha do iniciador.

    Args:
        pem: Certificado ou chave pública em formato PEM

    Returns:
        Objeto de chave pública RSA

    Raises:
        CredentialCryptoError: Se o PEM for inválido
    """
    data = pem.strip().encode("utf-8")
    try:
        if _CERTIFICATE_MARKER in pem:
            return x509.load_pem_x509_certificate(data).public_key()
        return serialization.load_pem_public_key(data)
    except Exception as exc:
        raise CredentialCryptoError(f"Invalid certificate or public key: {exc}") from exc
