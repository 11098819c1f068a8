"""Module to create accounts from the configuration."""
import logging

from bank_account.config import Config
from bank_account.domain.account.account import Account
from bank_account.infrastructure.date_source import DateSource, SystemDateSource
from bank_account.infrastructure.line_sink import LineSink, StreamLineSink
from bank_account.services.history.history_renderer import HistoryRenderer

logger = logging.getLogger(__name__)


def create_account(
    config: Config,
    *,
    date_source: DateSource | None = None,
    line_sink: LineSink | None = None,
    setup_logging: bool = False,
) -> Account:
    """Create an empty account wired according to the configuration.

    Args:
        config: The parsed configuration.
        date_source: Source of operation dates (default: the system clock,
            formatted with ``config.date_format``).
        line_sink: Destination of the rendered history (default: stdout).
        setup_logging: Apply the logging configuration first. Applications
            embedding an account usually do this once at startup.

    Returns:
        A new account with a zero balance.
    """
    if setup_logging:
        config.setup_logging()
    if date_source is None:
        date_source = SystemDateSource(config.date_format)
    if line_sink is None:
        line_sink = StreamLineSink()
    logger.debug("Creating account (history format: %s)", config.history)
    return Account(date_source, HistoryRenderer(line_sink, config.history))
