"""Cohen's Kappa and exact-match agreement between two annotators.

Both sequences must hold one label per item, aligned by index. Kappa corrects
the observed agreement for the agreement expected by chance given each
annotator's own label frequencies:

    kappa = (po - pe) / (1 - pe)

Kappa is undefined (``None``) for empty or misaligned input and when
``pe == 1``, i.e. both annotators used a single identical category throughout.
"""
import logging
from collections import Counter

from .base import CategoryDistribution, KappaValue, LabelSequence
from .errors import SequenceLengthError

logger = logging.getLogger(__name__)


def _check_aligned(a: LabelSequence, b: LabelSequence) -> int:
    if len(a) != len(b) or len(a) == 0:
        raise SequenceLengthError((len(a), len(b)))
    return len(a)


def _category_key(category) -> tuple:
    return (type(category).__name__, str(category))


def _matches(a: LabelSequence, b: LabelSequence) -> int:
    return sum(1 for x, y in zip(a, b) if x == y)


def observed_agreement(a: LabelSequence, b: LabelSequence) -> float:
    """Fraction of items on which both annotators chose the same label.

    Raises:
        SequenceLengthError: if the sequences are empty or differ in length
    """
    n = _check_aligned(a, b)
    return _matches(a, b) / n


def category_distribution(a: LabelSequence, b: LabelSequence) -> CategoryDistribution:
    """Union of categories in ``a`` and ``b`` with per-sequence relative frequencies.

    Categories are sorted so the result does not depend on argument order; a
    category missing from one sequence has marginal 0.0 there.

    Raises:
        SequenceLengthError: if either sequence is empty
    """
    if len(a) == 0 or len(b) == 0:
        raise SequenceLengthError((len(a), len(b)))

    counts_a = Counter(a)
    counts_b = Counter(b)
    categories = tuple(sorted(set(counts_a) | set(counts_b), key=_category_key))

    return CategoryDistribution(
        categories=categories,
        marginals_a={c: counts_a.get(c, 0) / len(a) for c in categories},
        marginals_b={c: counts_b.get(c, 0) / len(b) for c in categories},
    )


def cohen_kappa(a: LabelSequence, b: LabelSequence) -> KappaValue:
    """Cohen's Kappa for two annotators.

    Args:
        a, b: Label sequences of equal length

    Returns:
        The coefficient (not clamped), or None when it is undefined
    """
    if len(a) != len(b) or len(a) == 0:
        logger.debug("Kappa undefined for sequence lengths %d and %d", len(a), len(b))
        return None

    po = observed_agreement(a, b)
    pe = category_distribution(a, b).expected_agreement()

    if pe == 1:
        logger.debug("Kappa undefined: chance agreement is 1 over %d items", len(a))
        return None

    return (po - pe) / (1 - pe)


def exact_match_rate(a: LabelSequence, b: LabelSequence) -> float:
    """Proportion of index-aligned items with identical labels.

    Unlike :func:`cohen_kappa` this returns 0.0, not None, for empty or
    misaligned input.
    """
    if len(a) != len(b) or len(a) == 0:
        return 0.0
    return _matches(a, b) / len(a)
