"""Utility helpers for todolist."""
