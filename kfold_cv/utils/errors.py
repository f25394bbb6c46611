# kfold_cv/utils/errors.py
class CrossValidationError(Exception):
    """
    Base class for every error raised by the cross-validation engine.
    """


class InvalidConfigurationError(CrossValidationError, ValueError):
    """
    Raised when the fold configuration cannot produce a valid partition
    (k < 2, k larger than the number of samples, labels outside num_classes).
    """


class DimensionMismatchError(CrossValidationError, ValueError):
    """
    Raised when features / labels / weights disagree on the number of samples.
    """


class UninitializedModelError(CrossValidationError, RuntimeError):
    """
    Raised when the trained model is accessed before a full evaluation pass.
    """


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (paths, columns, registry names).
    Should NOT print traceback.
    """
