"""Testes do composition root."""

from __future__ import annotations

import base64
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.x509.oid import NameOID

import app.bootstrap as bootstrap
from app.infra.sinks import LoggingCallbackSink
from app.use_cases.daraja import ExecuteOperationsUseCase
from config.settings import BaseSettings, DarajaSettings

VALID_DARAJA = DarajaSettings(consumer_key="k", consumer_secret="s")


def _patch_settings(
    monkeypatch: pytest.MonkeyPatch,
    base: BaseSettings,
    daraja: DarajaSettings,
) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: base)
    monkeypatch.setattr(bootstrap, "get_daraja_settings", lambda: daraja)


def test_invalid_settings_block_boot_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch, BaseSettings(environment="production"), DarajaSettings())

    with pytest.raises(RuntimeError, match="MPESA_CONSUMER_KEY"):
        bootstrap.validate_runtime_settings()


def test_invalid_settings_only_warn_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch, BaseSettings(environment="development"), DarajaSettings())

    bootstrap.validate_runtime_settings()


def test_valid_settings_pass_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch, BaseSettings(environment="production"), VALID_DARAJA)

    bootstrap.validate_runtime_settings()


def test_factories(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch, BaseSettings(), VALID_DARAJA)

    assert isinstance(bootstrap.create_callback_sink(), LoggingCallbackSink)
    assert isinstance(bootstrap.create_execute_operations_use_case(), ExecuteOperationsUseCase)


def _write_certificate(path: Path, private_key: rsa.RSAPrivateKey) -> None:
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "apicrypt.safaricom.co.ke")])
    now = datetime.now(UTC)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(private_key, hashes.SHA256())
    )
    path.write_bytes(certificate.public_bytes(serialization.Encoding.PEM))


def test_security_credential_params_from_settings(tmp_path: Path) -> None:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    certificate = tmp_path / "ProductionCertificate.cer"
    _write_certificate(certificate, private_key)
    settings = DarajaSettings(
        consumer_key="k",
        consumer_secret="s",
        initiator_password="Safaricom999!*!",
        certificate_path=str(certificate),
    )

    params = bootstrap.create_security_credential_params(settings)

    ciphertext = base64.b64decode(params["securityCredential"])
    assert private_key.decrypt(ciphertext, padding.PKCS1v15()) == b"Safaricom999!*!"


def test_security_credential_params_empty_without_initiator_password() -> None:
    assert bootstrap.create_security_credential_params(VALID_DARAJA) == {}
