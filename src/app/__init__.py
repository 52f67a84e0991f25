"""App: casos de uso, serviços e infraestrutura do Calendar Insights.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de evento, estatísticas e autenticação
- use_cases/: casos de uso (estatísticas de agenda)
- services/: agregação de estatísticas e autenticação Google
- infra/: implementações concretas de IO (Google APIs, Firestore, JWT)
- protocols/: contratos/interfaces
- observability/: correlation_id, métricas via logs, redação de PII

Padrão: app executa; api adapta; config configura; utils apoia.
"""
