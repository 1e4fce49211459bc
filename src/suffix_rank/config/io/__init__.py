from .input_configs import InputConfig
from .input_configs import InputConfigType
from .input_configs import LocalFileInputConfig
from .input_configs import StdinInputConfig
from .output_configs import OutputConfig
from .output_configs import OutputConfigType

__all__ = [
    "InputConfig",
    "InputConfigType",
    "LocalFileInputConfig",
    "OutputConfig",
    "OutputConfigType",
    "StdinInputConfig",
]
