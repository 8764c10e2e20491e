"""
Top‑level package for the Project & Report API.

This file makes ``project_report_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``project_report_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
