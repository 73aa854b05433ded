"""
Top‑level package for the Pet Care API.

This file makes ``petcare_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``petcare_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
