"""Rotas de diagnóstico."""
