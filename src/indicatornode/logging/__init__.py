"""Logging and reporting helpers."""

from .logger import HumanLogger
from .report import generate_plotly_report

__all__ = ["HumanLogger", "generate_plotly_report"]
