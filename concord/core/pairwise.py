"""Pairwise Cohen's Kappa across N annotators."""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from .agreement import cohen_kappa
from .base import AgreementMatrix, KappaValue, LabelSequence, PairwiseResult
from .errors import SequenceLengthError

logger = logging.getLogger(__name__)


def annotator_pairs(n: int) -> List[Tuple[int, int]]:
    """Unordered pairs (i, j) with i < j, by increasing i then increasing j."""
    return [(i, j) for i in range(n) for j in range(i + 1, n)]


def pairwise_agreement(
    sequences: Sequence[LabelSequence],
    *,
    strict: bool = False,
    max_workers: Optional[int] = None,
    worker_prefix: str = "Worker",
    pair_prefix: str = "W",
    pair_separator: str = "–",
) -> AgreementMatrix:
    """Build the symmetric Kappa matrix for every pair of annotators.

    Args:
        sequences: One label sequence per annotator, aligned by item index
        strict: Raise SequenceLengthError up front if lengths differ or are zero,
            instead of leaving the affected pairs undefined
        max_workers: Compute pairs on a thread pool of this size when > 1
        worker_prefix: Prefix of per-annotator labels ("Worker 1", ...)
        pair_prefix: Prefix of annotator ids inside pair labels ("W1–W2", ...)
        pair_separator: Text placed between the two ids of a pair label

    Returns:
        AgreementMatrix with diagonal 1.0 and pairs in deterministic order
    """
    n = len(sequences)
    if strict and n > 0:
        lengths = [len(s) for s in sequences]
        if len(set(lengths)) > 1 or lengths[0] == 0:
            raise SequenceLengthError(lengths)

    pairs = annotator_pairs(n)
    kappas = _compute_kappas(sequences, pairs, max_workers)

    values: List[List[KappaValue]] = [[1.0] * n for _ in range(n)]
    results = []
    for (i, j), kappa in zip(pairs, kappas):
        values[i][j] = kappa
        values[j][i] = kappa
        label = f"{pair_prefix}{i + 1}{pair_separator}{pair_prefix}{j + 1}"
        results.append(PairwiseResult(first=i, second=j, label=label, kappa=kappa))

    undefined = sum(1 for k in kappas if k is None)
    if undefined:
        logger.info("%d of %d annotator pairs have undefined kappa", undefined, len(pairs))

    return AgreementMatrix(
        labels=tuple(f"{worker_prefix} {i + 1}" for i in range(n)),
        values=tuple(tuple(row) for row in values),
        pairs=tuple(results),
    )


def _compute_kappas(
    sequences: Sequence[LabelSequence],
    pairs: List[Tuple[int, int]],
    max_workers: Optional[int],
) -> List[KappaValue]:
    if max_workers and max_workers > 1 and len(pairs) > 1:
        logger.debug("Computing %d pairs with %d workers", len(pairs), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda p: cohen_kappa(sequences[p[0]], sequences[p[1]]), pairs))
    return [cohen_kappa(sequences[i], sequences[j]) for i, j in pairs]
