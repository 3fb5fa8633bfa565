"""Configuration adapters."""

from bustimes.adapters.config.app_config import AppConfig
from bustimes.adapters.config.module_configuration_loader import ModuleConfigurationLoader

__all__ = ["AppConfig", "ModuleConfigurationLoader"]
