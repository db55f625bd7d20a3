"""Utilitaires partagés (constantes, helpers de noms de fichiers)."""
