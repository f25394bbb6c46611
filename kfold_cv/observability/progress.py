#!filepath: kfold_cv/observability/progress.py
from kfold_cv import logs


class ProgressReporter:
    """
    Fold-level progress lines, routed through ``logs``.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def start(self, task: str, total: int, unit: str = "folds"):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started total={total} {unit}")

    def update(self, task: str, current: int, total: int, unit: str = "folds"):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task}: {current}/{total} {unit}")

    def done(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done")
