"""Clinic appointment booking and walk-in queue services."""
