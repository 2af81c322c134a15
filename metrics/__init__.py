"""Delivery telemetry aggregation and reporting."""

from metrics.report import format_summary, summary_lines
from metrics.telemetry import aggregate_summary

__all__ = ["aggregate_summary", "format_summary", "summary_lines"]
