"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any, NamedTuple

import yaml

logger = logging.getLogger(__name__)


class HistoryFormat(NamedTuple):
    """How amounts are formatted in the rendered history."""

    currency_symbol: str = "€"
    decimal_places: int = 1


class Config:  # pylint: disable=too-few-public-methods
    """A class to store the configuration."""

    LOG_DIRECTORY = Path(".local") / "share" / "bank-account"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __init__(self) -> None:
        # History config
        self.history = HistoryFormat()
        self.date_format = "%d-%m-%Y"
        # Logging config (logging.config.dictConfig schema)
        self.logging_config: dict[str, Any] | None = None

    @staticmethod
    def __get_str(config: dict[str, Any], key: str, default: str) -> str:
        """Return a string field, raising if it has another type."""
        value = config.get(key, default)
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a string, got {value!r}")
        return value

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file)

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(
                f"Configuration must be a mapping, got {type(config).__name__}"
            )

        decimal_places = config.get("decimal_places", self.history.decimal_places)
        if (
            not isinstance(decimal_places, int)
            or isinstance(decimal_places, bool)
            or decimal_places < 0
        ):
            raise ValueError(
                f"decimal_places must be a non-negative integer, got {decimal_places!r}"
            )
        logging_config = config.get("logging", self.logging_config)
        if logging_config is not None and not isinstance(logging_config, dict):
            raise ValueError(f"logging must be a mapping, got {logging_config!r}")

        currency_symbol = self.__get_str(
            config, "currency_symbol", self.history.currency_symbol
        )
        date_format = self.__get_str(config, "date_format", self.date_format)

        self.history = HistoryFormat(currency_symbol, decimal_places)
        self.date_format = date_format
        self.logging_config = logging_config

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix == ".yaml":
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    def setup_logging(self) -> None:
        """Configure the logging system.

        Uses the ``logging`` section of the configuration file when present,
        otherwise logs to a file in ``~/.local/share/bank-account``.
        An invalid ``logging`` section falls back to console logging.
        """
        if self.logging_config is None:
            log_directory = Path.home() / self.LOG_DIRECTORY
            log_directory.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_directory / "bank-account.log",
                level=logging.INFO,
                format=self.LOG_FORMAT,
            )
            return

        try:
            logging.config.dictConfig(self.logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            logging.basicConfig(level=logging.INFO, format=self.LOG_FORMAT)
            logger.error("Invalid logging configuration, using defaults: %s", e)
