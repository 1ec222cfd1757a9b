"""Reporting views for concord results."""
from concord.reporting.tables import agreement_frame, pairs_frame, generate_agreement_table, escape_latex

__all__ = ["agreement_frame", "pairs_frame", "generate_agreement_table", "escape_latex"]
