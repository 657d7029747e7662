"""Data contracts for the Open Charge Point Interface (OCPI)."""

__version__ = "0.1.0"
