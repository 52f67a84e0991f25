"""Rotas de autenticação (Google OAuth + sessão em cookie)."""
