"""Validators: validação de parâmetros de entrada da API.

Estrutura:
- calendar/: intervalo de datas das estatísticas de agenda
"""

__all__: list[str] = []
