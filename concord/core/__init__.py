"""Agreement calculators for concord."""

from .agreement import category_distribution, cohen_kappa, exact_match_rate, observed_agreement
from .alignment import align_outputs, consensus_type, pad_sequences, tokenize_labels
from .base import AgreementMatrix, CategoryDistribution, KappaValue, LabelSequence, PairwiseResult
from .errors import ConcordError, SequenceLengthError
from .interpretation import KappaBand, describe_kappa, format_kappa, interpret_kappa, kappa_band
from .pairwise import annotator_pairs, pairwise_agreement

__all__ = [
    # Calculators
    "observed_agreement",
    "category_distribution",
    "cohen_kappa",
    "exact_match_rate",
    "pairwise_agreement",
    "annotator_pairs",
    # Interpretation
    "KappaBand",
    "kappa_band",
    "interpret_kappa",
    "describe_kappa",
    "format_kappa",
    # Worker outputs
    "tokenize_labels",
    "pad_sequences",
    "align_outputs",
    "consensus_type",
    # Types
    "LabelSequence",
    "KappaValue",
    "CategoryDistribution",
    "PairwiseResult",
    "AgreementMatrix",
    "ConcordError",
    "SequenceLengthError",
]
