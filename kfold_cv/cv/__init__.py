from .dataset import CVDataset, assert_data_consistency, assert_weights_consistency
from .geometry import FoldGeometry
from .partitioner import AugmentedBuffer, FoldPartitioner
from .model_holder import ModelHolder
from .protocols import Metric, Trainable, WeightedTrainable, supports_weighted_training
from .k_fold_cv import KFoldCV

__all__ = [
    "CVDataset",
    "assert_data_consistency",
    "assert_weights_consistency",
    "FoldGeometry",
    "AugmentedBuffer",
    "FoldPartitioner",
    "ModelHolder",
    "Metric",
    "Trainable",
    "WeightedTrainable",
    "supports_weighted_training",
    "KFoldCV",
]
