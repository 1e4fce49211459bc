from .algorithms import AlgoConfig
from .algorithms import SuffixArrayAlgorithmConfig
from .base import Config
from .debug import DebugConfig
from .io import LocalFileInputConfig
from .io import OutputConfig
from .io import StdinInputConfig

__all__ = [
    "AlgoConfig",
    "Config",
    "DebugConfig",
    "LocalFileInputConfig",
    "OutputConfig",
    "StdinInputConfig",
    "SuffixArrayAlgorithmConfig",
]
