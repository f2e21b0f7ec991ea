"""Repoforge: git hosting onboarding and repository provisioning."""

__version__ = "0.1.0"
