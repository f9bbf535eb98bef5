"""Shared helpers for setenv_tools."""
