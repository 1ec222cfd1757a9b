"""Utility functions for concord."""
from concord.utils.stats import bootstrap_kappa_ci, mean_pairwise_kappa, summarize_agreement

__all__ = ["bootstrap_kappa_ci", "mean_pairwise_kappa", "summarize_agreement"]
