"""Turn raw worker outputs into aligned label sequences.

Workers answer with free text such as ``"Positive, Urgent"``. Each output is
split into labels on commas and newlines, and the resulting sequences are
right-padded with an empty label so every annotator covers the same number of
positions.
"""
import re
from typing import List, Sequence

SPLIT_PATTERN = re.compile(r"[,\n]+")

FULL_AGREEMENT = "Full Agreement"
DISAGREEMENT = "Disagreement (Synthesized)"


def tokenize_labels(output: str) -> List[str]:
    """Split a worker output into trimmed, non-empty labels."""
    return [token.strip() for token in SPLIT_PATTERN.split(output) if token.strip()]


def pad_sequences(sequences: Sequence[Sequence[str]], fill: str = "", min_length: int = 0) -> List[List[str]]:
    """Right-pad every sequence with ``fill`` to the longest length (at least ``min_length``)."""
    target = max([len(s) for s in sequences] + [min_length])
    return [list(s) + [fill] * (target - len(s)) for s in sequences]


def align_outputs(outputs: Sequence[str], fill: str = "") -> List[List[str]]:
    """Tokenize each worker output and pad to a common length of at least 1."""
    return pad_sequences([tokenize_labels(o) for o in outputs], fill=fill, min_length=1)


def consensus_type(outputs: Sequence[str]) -> str:
    """``"Full Agreement"`` if every trimmed output is identical."""
    if not outputs:
        raise ValueError("At least one worker output is required")
    trimmed = [o.strip() for o in outputs]
    if all(o == trimmed[0] for o in trimmed):
        return FULL_AGREEMENT
    return DISAGREEMENT
