"""Geração do SecurityCredential exigido por B2C, B2B e operações de conta."""

from __future__ import annotations

import base64

from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .errors import CredentialCryptoError
from .keys import load_public_key


def encrypt_security_credential(initiator_password: str, certificate_pem: str) -> str:
    """Cifra a senha do iniciador com a chave pública do certificado Daraja.

    SecurityCredential = base64(RSA-PKCS#1 v1.5(senha)).

    Args:
        initiator_password: Senha do usuário iniciador (portal M-Pesa)
        certificate_pem: Certificado Daraja em PEM

    Returns:
        Credencial em base64 (ASCII)

    Raises:
        CredentialCryptoError: Se a senha estiver vazia ou a chave for inválida
    """
    if not initiator_password:
        raise CredentialCryptoError("Initiator password is required")

    public_key = load_public_key(certificate_pem)
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise CredentialCryptoError("Certificate does not carry an RSA public key")

    try:
        ciphertext = public_key.encrypt(initiator_password.encode("utf-8"), padding.PKCS1v15())
    except ValueError as exc:
        raise CredentialCryptoError(f"Security credential encryption failed: {exc}") from exc
    return base64.b64encode(ciphertext).decode("ascii")
