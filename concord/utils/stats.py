"""Summary statistics over agreement results.

Provides a bootstrap confidence interval for Cohen's Kappa, the mean pairwise
Kappa across annotators, and a flat summary for reporting.
"""
import logging
import numpy as np
from typing import Any, Dict, Optional, Tuple

from concord.core.agreement import cohen_kappa
from concord.core.base import AgreementMatrix, KappaValue, LabelSequence
from concord.core.interpretation import interpret_kappa

logger = logging.getLogger(__name__)


def bootstrap_kappa_ci(
    a: LabelSequence,
    b: LabelSequence,
    confidence: float = 0.95,
    n_bootstrap: int = 1000,
    seed: Optional[int] = None,
) -> Optional[Tuple[float, float]]:
    """Bootstrap confidence interval for Cohen's Kappa between two annotators.

    Items are resampled with replacement, keeping each item's pair of labels
    together. Resamples whose Kappa is undefined are skipped.

    Args:
        a, b: Label sequences of equal length
        confidence: Confidence level (default 0.95 for 95% CI)
        n_bootstrap: Number of bootstrap resamples
        seed: Random seed for reproducibility

    Returns:
        (lower_bound, upper_bound), or None if Kappa is undefined for the input
        or for every resample
    """
    if cohen_kappa(a, b) is None:
        return None

    rng = np.random.default_rng(seed)
    n = len(a)
    boot_kappas = []
    for _ in range(n_bootstrap):
        idx = rng.choice(n, size=n, replace=True)
        kappa = cohen_kappa([a[i] for i in idx], [b[i] for i in idx])
        if kappa is not None:
            boot_kappas.append(kappa)

    if not boot_kappas:
        return None
    skipped = n_bootstrap - len(boot_kappas)
    if skipped:
        logger.debug("Skipped %d of %d bootstrap resamples with undefined kappa", skipped, n_bootstrap)

    alpha = 1 - confidence
    lower = np.percentile(boot_kappas, 100 * alpha / 2)
    upper = np.percentile(boot_kappas, 100 * (1 - alpha / 2))
    return float(lower), float(upper)


def mean_pairwise_kappa(matrix: AgreementMatrix) -> KappaValue:
    """Mean Kappa over annotator pairs whose Kappa is defined."""
    defined = [k for k in matrix.pair_agreements if k is not None]
    if not defined:
        return None
    return float(np.mean(defined))


def summarize_agreement(matrix: AgreementMatrix) -> Dict[str, Any]:
    """Flat summary of a matrix for reports.

    Returns:
        Dict with num_annotators, num_pairs, num_defined_pairs, mean_kappa,
        interpretation and a per-pair list
    """
    mean_kappa = mean_pairwise_kappa(matrix)
    return {
        "num_annotators": matrix.size,
        "num_pairs": len(matrix.pairs),
        "num_defined_pairs": sum(1 for k in matrix.pair_agreements if k is not None),
        "mean_kappa": mean_kappa,
        "interpretation": interpret_kappa(mean_kappa),
        "pairs": [p.to_dict() for p in matrix.pairs],
    }
