"""concord: inter-annotator agreement for labeling agents."""
__version__ = "0.1.0"

from concord.core.agreement import cohen_kappa, exact_match_rate
from concord.core.base import AgreementMatrix, PairwiseResult
from concord.core.errors import ConcordError, SequenceLengthError
from concord.core.interpretation import interpret_kappa
from concord.core.pairwise import pairwise_agreement


# Lazy imports for modules that pull in numpy, pandas or yaml
def __getattr__(name):
    _lazy = {
        "mean_pairwise_kappa": "concord.utils.stats",
        "bootstrap_kappa_ci": "concord.utils.stats",
        "summarize_agreement": "concord.utils.stats",
        "agreement_frame": "concord.reporting.tables",
        "pairs_frame": "concord.reporting.tables",
        "generate_agreement_table": "concord.reporting.tables",
        "ConcordConfig": "concord.config.configuration",
        "load_config": "concord.config.configuration",
        "build_matrix": "concord.config.configuration",
        "bootstrap_ci": "concord.config.configuration",
        "agreement_table": "concord.config.configuration",
        "setup_logging": "concord.config.configuration",
    }
    if name in _lazy:
        import importlib
        mod = importlib.import_module(_lazy[name])
        return getattr(mod, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
