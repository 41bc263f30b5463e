import os
import sys
import hydra
from omegaconf import DictConfig, OmegaConf

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config import ConfigManager, SignalingConfig
from src.common.logging import setup_logger
from src.signaling.application.runner import solve_all

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    signaling_cfg = ConfigManager.validate(
        OmegaConf.merge(OmegaConf.structured(SignalingConfig), cfg.signaling)
    )
    print(f"Configuration:\n{OmegaConf.to_yaml(signaling_cfg)}")
    setup_logger("src", signaling_cfg.log_level)

    try:
        reports = solve_all(signaling_cfg)
    except KeyboardInterrupt:
        print("Interrupted by user.")
        return

    for report in reports:
        print(f"{report.instance}: {report.score} / {report.upper_bound} ({report.seconds:.1f}s)")

if __name__ == "__main__":
    main()
