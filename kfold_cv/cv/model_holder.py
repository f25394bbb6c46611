# kfold_cv/cv/model_holder.py
from __future__ import annotations

from typing import Any, Optional

from kfold_cv.utils.errors import UninitializedModelError


class ModelHolder:
    """
    Owns the most recently retained model.

    The model is only handed over after a full k-fold pass, so ``access``
    never exposes a model from an interrupted pass.
    """

    def __init__(self):
        self._model: Optional[Any] = None
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def retain(self, model: Any) -> None:
        self._model = model
        self._ready = True

    def access(self) -> Any:
        if not self._ready:
            raise UninitializedModelError(
                "KFoldCV.model: attempted to access an uninitialized model"
            )
        return self._model
