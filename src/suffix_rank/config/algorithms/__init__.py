from .base import AlgorithmConfig
from .suffix_array import SuffixArrayAlgorithmConfig
from .suffix_array import SuffixArrayMismatchError

type AlgoConfig = SuffixArrayAlgorithmConfig

__all__ = [
    "AlgoConfig",
    "AlgorithmConfig",
    "SuffixArrayAlgorithmConfig",
    "SuffixArrayMismatchError",
]
