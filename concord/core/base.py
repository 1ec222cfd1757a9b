"""Result types shared by the agreement calculators."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .interpretation import interpret_kappa

# One annotator's labels, aligned by item index with every other annotator.
LabelSequence = Sequence[str]

# A Kappa coefficient, or None when the statistic is undefined.
KappaValue = Optional[float]


@dataclass(frozen=True)
class CategoryDistribution:
    """Union of categories across two sequences with each sequence's marginals."""
    categories: Tuple[str, ...]
    marginals_a: Dict[str, float] = field(default_factory=dict)
    marginals_b: Dict[str, float] = field(default_factory=dict)

    def expected_agreement(self) -> float:
        """Chance agreement: sum over categories of pA(c) * pB(c)."""
        return sum(
            self.marginals_a.get(c, 0.0) * self.marginals_b.get(c, 0.0)
            for c in self.categories
        )


@dataclass(frozen=True)
class PairwiseResult:
    """Kappa between annotators ``first`` and ``second`` (0-based)."""
    first: int
    second: int
    label: str
    kappa: KappaValue

    def to_dict(self) -> Dict[str, Any]:
        return {
            "first": self.first,
            "second": self.second,
            "pair": self.label,
            "kappa": self.kappa,
            "interpretation": interpret_kappa(self.kappa),
        }


@dataclass(frozen=True)
class AgreementMatrix:
    """Symmetric Kappa matrix over N annotators.

    ``values[i][j]`` holds the Kappa for annotators i and j, ``None`` where it
    is undefined. The diagonal is always 1.0. ``pairs`` lists each unordered
    pair once, ordered by increasing i and then increasing j.
    """
    labels: Tuple[str, ...]
    values: Tuple[Tuple[KappaValue, ...], ...]
    pairs: Tuple[PairwiseResult, ...] = ()

    @property
    def size(self) -> int:
        return len(self.labels)

    @property
    def pair_labels(self) -> List[str]:
        return [p.label for p in self.pairs]

    @property
    def pair_agreements(self) -> List[KappaValue]:
        return [p.kappa for p in self.pairs]

    def value(self, i: int, j: int) -> KappaValue:
        return self.values[i][j]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": list(self.labels),
            "values": [list(row) for row in self.values],
            "pair_labels": self.pair_labels,
            "pair_agreements": self.pair_agreements,
        }
