"""Tabular views of an agreement matrix for reports."""
import re

import pandas as pd

from concord.core.base import AgreementMatrix
from concord.core.interpretation import format_kappa, interpret_kappa

_LATEX_SPECIAL = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}
_LATEX_PATTERN = re.compile("|".join(re.escape(c) for c in _LATEX_SPECIAL))


def escape_latex(text: str) -> str:
    """Escape characters that have a special meaning in LaTeX."""
    return _LATEX_PATTERN.sub(lambda m: _LATEX_SPECIAL[m.group()], text)


def agreement_frame(matrix: AgreementMatrix) -> pd.DataFrame:
    """Square DataFrame of Kappa values labelled by annotator; undefined entries are NaN."""
    data = [[float("nan") if v is None else v for v in row] for row in matrix.values]
    return pd.DataFrame(data, index=list(matrix.labels), columns=list(matrix.labels), dtype=float)


def pairs_frame(matrix: AgreementMatrix) -> pd.DataFrame:
    """One row per annotator pair with its Kappa and interpretation."""
    rows = [
        {
            "pair": p.label,
            "kappa": float("nan") if p.kappa is None else p.kappa,
            "interpretation": interpret_kappa(p.kappa),
        }
        for p in matrix.pairs
    ]
    return pd.DataFrame(rows, columns=["pair", "kappa", "interpretation"])


def generate_agreement_table(
    matrix: AgreementMatrix,
    caption: str = "Pairwise Cohen's Kappa between annotators",
    label: str = "tab:agreement",
    digits: int = 2,
) -> str:
    """Generate a LaTeX table of the agreement matrix.

    Args:
        matrix: Result of pairwise_agreement
        caption: LaTeX table caption
        label: LaTeX table label
        digits: Decimal places for each coefficient

    Returns:
        LaTeX table string, "--" marking undefined coefficients
    """
    if matrix.size == 0:
        return ""

    col_spec = "l" + "c" * matrix.size

    lines = []
    lines.append(r"\begin{table}[t]")
    lines.append(r"\centering")
    lines.append(r"\caption{" + escape_latex(caption) + "}")
    lines.append(r"\label{" + label + "}")
    lines.append(r"\begin{tabular}{" + col_spec + "}")
    lines.append(r"\toprule")
    lines.append(" & ".join([""] + [escape_latex(name) for name in matrix.labels]) + r" \\")
    lines.append(r"\midrule")

    for name, row in zip(matrix.labels, matrix.values):
        cells = ["--" if v is None else format_kappa(v, digits) for v in row]
        lines.append(" & ".join([escape_latex(name)] + cells) + r" \\")

    lines.append(r"\bottomrule")
    lines.append(r"\end{tabular}")
    lines.append(r"\end{table}")

    return "\n".join(lines)
