"""Shared utilities and cross-cutting helpers for the backend."""

from rolodex_backend.shared.paths import MISSING, get_path, pop_path, set_path, split_path

__all__ = ["MISSING", "get_path", "pop_path", "set_path", "split_path"]
