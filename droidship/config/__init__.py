"""Configuration package for Droidship."""

from .models import UserConfigData
from .user_config import UserConfig, create_user_config


__all__ = ["UserConfig", "UserConfigData", "create_user_config"]
