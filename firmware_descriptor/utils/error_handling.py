"""Centralized error handling for CLI commands.

This is the fatal-exit boundary: exceptions that the library raises for
broken remote contracts are turned into process termination here, and only
here.
"""

import functools
import logging
import sys
from collections.abc import Callable
from typing import Any, NoReturn

import click

from firmware_descriptor.config import ConfigurationError
from firmware_descriptor.exceptions import (
    BusinessLogicException,
    FatalEnvelopeException,
    ValidationException,
)

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


def exit_with_cause(message: str) -> NoReturn:
    """Log an unrecoverable error and terminate with a non-zero status."""
    logger.error("%s", message)
    click.echo(f"Error: {message}", err=True)
    sys.exit(EXIT_FAILURE)


def handle_cli_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to turn library exceptions into CLI exits consistently.

    FatalEnvelopeException goes through exit_with_cause. Validation and
    configuration errors are reported on stderr with exit status 1.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FatalEnvelopeException as e:
            exit_with_cause(e.message)
        except ConfigurationError as e:
            logger.error("Configuration error in %s: %s", func.__name__, str(e))
            click.echo(f"Error: {e}", err=True)
            sys.exit(EXIT_FAILURE)
        except ValidationException as e:
            logger.debug("Validation failed in %s: %s", func.__name__, e.message)
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(EXIT_FAILURE)
        except BusinessLogicException as e:
            logger.error("Exception in %s: %s", func.__name__, e.message, exc_info=True)
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(EXIT_FAILURE)

    return wrapper
