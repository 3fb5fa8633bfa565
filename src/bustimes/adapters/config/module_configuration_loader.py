"""Module configuration loader."""

from pydantic import ValidationError

from bustimes.adapters.config.app_config import AppConfig
from bustimes.domain.models.module_config import ModuleConfig


class ModuleConfigurationLoader:
    """Loads module configurations from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[tuple[str, ModuleConfig]]:
        """Load ``(identifier, ModuleConfig)`` pairs from app config.

        Raises:
            ValueError: A module has no identifier, an identifier is used
                twice, or a module's settings are invalid.
        """
        modules: list[tuple[str, ModuleConfig]] = []
        seen: set[str] = set()

        for module_data in config.get_modules_config():
            if not isinstance(module_data, dict):
                continue

            settings = dict(module_data)
            identifier = settings.pop("identifier", None)
            if not identifier:
                raise ValueError("All modules must have an 'identifier' field")
            identifier = str(identifier)
            if identifier in seen:
                raise ValueError(f"Module identifiers must be unique. Duplicate: '{identifier}'")
            seen.add(identifier)

            try:
                module_config = ModuleConfig.model_validate(settings)
            except ValidationError as e:
                raise ValueError(f"Invalid configuration for module '{identifier}': {e}") from e

            modules.append((identifier, module_config))

        return modules
