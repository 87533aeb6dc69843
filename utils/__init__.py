"""Utility helpers (logging, session, time formatting)."""
