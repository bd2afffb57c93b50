# File: greetfetch/report/__init__.py
"""greetfetch.report: сохранение результата загрузки в виде отчёта."""

from .json_report import render_json

__all__ = ["render_json"]
