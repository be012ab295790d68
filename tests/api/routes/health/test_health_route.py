"""Testes do endpoint de health."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from api.routes.health import router as health_module


@pytest.mark.asyncio
async def test_health_reports_service_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        health_module,
        "get_base_settings",
        lambda: SimpleNamespace(service_name="daraja_bridge", environment="staging"),
    )

    response = await health_module.health_check()

    assert response.status == "healthy"
    assert response.service == "daraja_bridge"
    assert response.environment == "staging"
