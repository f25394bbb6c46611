from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class CVResult:
    """
    CVResult（FINAL / FROZEN）

    - result of one complete k-fold pass, in memory only
    - model is the last fold's model
    """
    model: Any
    mean_score: float
    fold_scores: Tuple[float, ...]
    k: int
