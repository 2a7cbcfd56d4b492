"""Configuration management for Salary Slip.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - profile: path to profile.yaml (optional, if not colocated)

2. profile.yaml - User's pay configuration
   - pay_policy: allowance and danger pay amounts, danger zone list

Config directory resolution:
1. SALARY_SLIP_CONFIG_PATH environment variable (if set)
2. ~/.config/salary-slip/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set)
2. profile.yaml in same config directory
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .schemas import PayPolicy

logger = logging.getLogger(__name__)

APP_NAME = "salary-slip"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"
POLICY_SECTION = "pay_policy"


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class PolicyValidationError(ValueError):
    """Raised when the pay_policy section of the profile is invalid."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. SALARY_SLIP_CONFIG_PATH environment variable
    2. ~/.config/salary-slip/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("SALARY_SLIP_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    config_dir = get_config_dir()

    # 1. Check settings.json for custom profile path
    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile).expanduser()
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Fix the 'profile' key in {get_settings_path()}"
            )
        return profile_path

    # 2. Check for profile.yaml in config directory
    profile_path = config_dir / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found. Checked:\n"
            f"  1. settings.json 'profile' key (not set)\n"
            f"  2. {profile_path} (not found)"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load user profile from profile.yaml.

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Returns:
        Profile dictionary (empty dict if not required and not found)
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    logger.debug(f"Loading profile from {profile_path}")
    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def load_pay_policy(profile: Optional[dict] = None) -> PayPolicy:
    """Load the pay policy from the profile's pay_policy section.

    Missing profile or missing section yields the default PayPolicy
    (built-in constants, no danger zones).

    Args:
        profile: Profile dict to read (loads the active profile if None)

    Raises:
        PolicyValidationError: If the section has unknown keys or bad values
    """
    if profile is None:
        profile = load_profile(require_exists=False)

    section = profile.get(POLICY_SECTION)
    if section is None:
        logger.debug("No pay_policy in profile, using default amounts")
        return PayPolicy()

    if not isinstance(section, dict):
        raise PolicyValidationError(
            f"'{POLICY_SECTION}' must be a mapping, got {type(section).__name__}"
        )

    try:
        return PayPolicy.model_validate(section)
    except ValidationError as e:
        raise PolicyValidationError(f"Invalid {POLICY_SECTION}: {e}") from e
