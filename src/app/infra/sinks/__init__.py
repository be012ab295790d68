"""Destinos dos eventos emitidos por callbacks Daraja."""

from app.infra.sinks.logging_sink import LoggingCallbackSink

__all__ = ["LoggingCallbackSink"]
