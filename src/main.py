import argparse
import sys
import os

# Add project root to sys.path to allow imports from 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def main():
    """
    Main entry point. Extra key=value arguments override the config file,
    e.g. exec_duration_seconds=60 optimizer.escalation_divisor=16
    """
    parser = argparse.ArgumentParser(description="Traffic signal schedule optimizer")
    parser.add_argument('command', choices=['signaling', 'tune'], help="Optimize instances or tune the escalation divisor")
    parser.add_argument('--config-dir', default="conf", help="Directory holding signaling/<profile>.yaml")
    parser.add_argument('--profile', default="default", help="Config profile name")
    
    args, unknown = parser.parse_known_args()

    from src.common.config import ConfigManager
    from src.common.exceptions import SignalingError
    from src.common.logging import setup_logger
    from src.signaling.application.runner import solve_all, tune_all

    try:
        cfg = ConfigManager(args.config_dir).load_signaling_config(args.profile, overrides=unknown)
        setup_logger("src", cfg.log_level)

        if args.command == 'signaling':
            reports = solve_all(cfg)
            for report in reports:
                print(f"{report.instance}: {report.score} / {report.upper_bound} ({report.seconds:.1f}s)")
        else:
            for instance, (divisor, score) in tune_all(cfg).items():
                print(f"{instance}: divisor {divisor} -> {score}")
    except SignalingError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
