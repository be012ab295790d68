"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: processamento de callbacks e lotes outbound
- infra/: implementações concretas (crypto, sinks)
- protocols/: contratos e modelos canônicos
- domain/: codec de timestamps
- observability/: correlation_id dos logs estruturados
- constants/: enums e constantes do protocolo

Padrão: app executa; api adapta; config configura.
"""
