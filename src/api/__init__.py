"""API: camada de borda do protocolo Daraja.

Responsabilidades:
- Receber callbacks da Daraja (webhooks) e operações outbound
- Validar parâmetros e corpos recebidos
- Normalizar callbacks para o modelo canônico
- Construir corpos no formato do fornecedor

Subpastas:
- connectors/: transporte HTTP (OAuth + envio) e parse de webhook
- normalizers/: callbacks Daraja → NormalizedPayment
- payload_builders/: catálogo de operações e encoder de requisições
- validators/: presença e formato de parâmetros
- routes/: endpoints HTTP (callbacks, operações, health)

NÃO PODE conter: políticas de emissão nem orquestração de use cases.
"""
