"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests do dashboard
- Validar cookies de sessão e parâmetros
- Normalizar payloads do Google Calendar para modelos internos

Subpastas:
- normalizers/: conversão de payloads externos → modelos internos
- validators/: validação de parâmetros de entrada
- routes/: endpoints HTTP (auth, calendar, debug, health)

NÃO PODE conter: regras de agregação, acesso direto a storage.
"""
