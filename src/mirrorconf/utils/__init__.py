"""Utility helpers for mirrorconf."""
