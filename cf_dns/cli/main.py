#!/usr/bin/env python3
"""
cf - Command Line Interface

Main entry point for the cf tool. With no arguments it starts an
interactive shell; otherwise the arguments are run as a single command.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from rich.console import Console

from ..core.dns_manager import DNSManager
from ..core.exceptions import ConfigError
from ..core.record_manager import Outcome
from ..core.session import Session
from ..parsers.command_line import join_args
from ..providers.dns_client import PROVIDERS

logger = logging.getLogger(__name__)

CONFIG_VAR = "CF_DNS_CONFIG"
PROMPT = "cf> "


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    interactive = len(args) == 0

    try:
        config = load_config(os.environ.get(CONFIG_VAR))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    config_logger(config)

    session = Session(config, interactive=interactive, console=Console())
    manager = DNSManager(session)
    try:
        if interactive:
            run_interactive(manager)
        else:
            manager.process_line(join_args(args))
    finally:
        session.close()


def run_interactive(manager: DNSManager):
    """Read and run command lines until quit or end of input."""
    console = manager.session.console
    while True:
        try:
            line = console.input(PROMPT)
        except EOFError:
            console.print()
            break

        if manager.process_line(line) is Outcome.QUIT:
            break


def load_config(config_path: Optional[str]) -> Dict:
    """Load configuration from YAML file, or the defaults when none is set."""
    if not config_path:
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_path} must be a YAML mapping")

    defaults = get_default_config()
    for key, value in defaults.items():
        config.setdefault(key, value)
    if config["default_provider"] not in PROVIDERS:
        raise ConfigError(
            f"Unknown DNS provider '{config['default_provider']}' in {config_path}"
        )
    logger.info(f"Configuration loaded from {Path(config_path).resolve()}")
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {
            "cloudflare": {
                "base_url": "https://api.cloudflare.com/client/v4",
                "timeout": 10.0,
            }
        },
        "default_provider": "cloudflare",
        "logging": {"level": "WARNING"},
    }


def config_logger(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = logging_config.get("level", "WARNING")
    log_file = logging_config.get("file")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


if __name__ == "__main__":
    main()
