"""
Top‑level package for the User Query API.

This file makes ``user_query_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``user_query_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
