"""Agora discussion board front end."""
