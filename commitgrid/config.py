#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("commitgrid")

# Lookback window and registry location used when no config overrides them
DAYS_IN_WINDOW = 183
DEFAULT_REGISTRY_FILE = ".gogitlocalstats"

FAILURE_POLICIES = ("abort", "warn")


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. COMMITGRID_CONFIG environment variable
    2. ~/.commitgrid/ directory
    """
    if 'COMMITGRID_CONFIG' in os.environ:
        path = Path(os.environ['COMMITGRID_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.commitgrid'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = config_dir / filename
        if path.exists() and path.stat().st_size > 0:
            return path

    # If no file exists, return default path for saving
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            suffix = config_path.suffix.lower()
            if suffix == '.toml':
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif suffix in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f)
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            config = merge_configs(config, file_config or {})
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    config = apply_env_overrides(config)

    return config


def save_config(config):
    """Save configuration to file."""
    config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.suffix.lower() in ['.yaml', '.yml']:
            with open(config_path, 'w') as f:
                yaml.safe_dump(config, f, default_flow_style=False)
        else:
            # TOML is read-only through tomllib, so anything else is written as JSON
            if config_path.suffix.lower() != '.json':
                logger.warning(f"Cannot write {config_path.suffix} config. Saving as JSON instead.")
                config_path = config_path.with_suffix('.json')
            with open(config_path, 'w') as f:
                json.dump(config, f, indent=2)

        logger.info(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Error saving config to {config_path}: {e}")


def get_default_config():
    """Get default configuration."""
    return {
        "general": {
            "registry_file": DEFAULT_REGISTRY_FILE,
            "emails_file": "",
            "window_days": DAYS_IN_WINDOW,
            "failure_policy": "abort",
        },
        "scan": {
            # Large, vendored or (on macOS) permission-restricted trees
            "exclude_directories": [
                "node_modules",
                "vendor",
                "Pictures",
                "Library",
                ".Trash",
            ],
        },
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        },
    }


def configure_logging(config, verbose=False):
    """Apply the logging section of the configuration to the root logger."""
    log_config = config.get("logging", {})
    level_name = "DEBUG" if verbose else str(log_config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger.setLevel(level)
    fmt = log_config.get("format")
    if fmt:
        for handler in logging.getLogger().handlers:
            handler.setFormatter(logging.Formatter(fmt))


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: COMMITGRID_SECTION_KEY
    For example: COMMITGRID_GENERAL_FAILURE_POLICY=warn
    List settings take comma separated values, e.g.
    COMMITGRID_SCAN_EXCLUDE_DIRECTORIES=node_modules,build
    """
    env_prefix = "COMMITGRID_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == "COMMITGRID_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i : i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                if isinstance(current_level[matched_key], list):
                    # Lists are given comma separated
                    current_level[matched_key] = [p.strip() for p in value.split(',') if p.strip()]
                else:
                    current_level[matched_key] = typed_value
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict, e.g., env var is longer but we found a non-dict value
                break

    return config
