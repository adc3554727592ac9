"""Utility helpers for logging and console output."""
