"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (wiring, servidor com drain)
- domain/: modelos do formulário e do resultado
- use_cases/: processamento do formulário
- services/: registro de sites e coordenador de shutdown
- infra/: canais de entrega (mail, telegram)
- protocols/: contratos entre camadas
- observability/: correlation id e métricas em log
- constants/: identidade do serviço
"""
