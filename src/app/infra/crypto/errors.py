"""Erros de criptografia de credenciais Daraja."""


class CredentialCryptoError(Exception):
    """Erro em operação criptográfica de credencial."""
