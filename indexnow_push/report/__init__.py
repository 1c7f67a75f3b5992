# File: indexnow_push/report/__init__.py
"""indexnow_push.report: persistence of run reports."""

from .json_report import render_json

__all__ = ["render_json"]
