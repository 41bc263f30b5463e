from .models import OptimizerConfig, OutputConfig, SignalingConfig
from .manager import ConfigManager

__all__ = [
    "OptimizerConfig",
    "OutputConfig",
    "SignalingConfig",
    "ConfigManager",
]
