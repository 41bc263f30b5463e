from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import List, Optional

from .models import SignalingConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centralizes loading and validation of the signaling configuration"""
    
    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)
    
    def load_signaling_config(
        self,
        profile: str = "default",
        overrides: Optional[List[str]] = None
    ) -> DictConfig:
        """Loads conf/signaling/<profile>.yaml on top of the typed defaults"""
        config_path = self.config_dir / "signaling" / f"{profile}.yaml"
        
        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")
        
        try:
            file_cfg = OmegaConf.load(config_path)
            cli_cfg = OmegaConf.from_dotlist(overrides or [])
            cfg = OmegaConf.merge(OmegaConf.structured(SignalingConfig), file_cfg, cli_cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid config {config_path}: {e}") from e
        
        return self.validate(cfg)

    @staticmethod
    def validate(cfg: DictConfig) -> DictConfig:
        """Checks values OmegaConf's type system cannot express"""
        if cfg.exec_duration_seconds < 0:
            raise ConfigurationError("exec_duration_seconds must be >= 0")
        opt = cfg.optimizer
        if opt.escalation_divisor < 1:
            raise ConfigurationError("optimizer.escalation_divisor must be >= 1")
        if opt.stagnation_rounds < 1:
            raise ConfigurationError("optimizer.stagnation_rounds must be >= 1")
        if opt.max_position is not None and opt.max_position < 1:
            raise ConfigurationError("optimizer.max_position must be >= 1")
        if any(d <= 0 for d in opt.deltas):
            raise ConfigurationError("optimizer.deltas must be positive step sizes")
        if cfg.tuning.min_divisor < 1 or cfg.tuning.max_divisor < cfg.tuning.min_divisor:
            raise ConfigurationError("tuning divisor range is empty")
        return cfg
