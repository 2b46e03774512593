"""
Top‑level package for the Record Store API.

This file makes ``record_store_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``record_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
