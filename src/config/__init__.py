from src.config.loader import ConfigError, load_config
from src.config.models import ConsoleConfig

__all__ = ["ConfigError", "ConsoleConfig", "load_config"]
