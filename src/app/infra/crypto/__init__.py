"""Criptografia de credenciais Daraja.

Gera o SecurityCredential (senha do iniciador cifrada com o certificado
público da Safaricom) usado nas operações B2C, B2B, identidade e conta.
"""

from .errors import CredentialCryptoError
from .keys import load_public_key
from .security_credential import encrypt_security_credential

__all__ = [
    "CredentialCryptoError",
    "encrypt_security_credential",
    "load_public_key",
]
