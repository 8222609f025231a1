"""Utility helpers for pdfa-validator."""
