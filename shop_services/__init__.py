"""
Top-level package for the shop services.

This file makes ``shop_services`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``shop_services.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
