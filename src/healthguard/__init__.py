"""HealthGuard - AI-assisted personal wellness dashboard."""

__version__ = "0.1.0"
