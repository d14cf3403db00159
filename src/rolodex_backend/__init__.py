"""Rolodex backend package wiring and entrypoints."""

from rolodex_backend.main import run_dev, run_prod
from rolodex_backend.settings import BackendSettings, get_settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
]
