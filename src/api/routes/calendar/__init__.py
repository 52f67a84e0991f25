"""Rotas de agenda."""
