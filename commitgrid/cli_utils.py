"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import click
from functools import wraps

from .config import logger
from .exit_codes import (
    INTERRUPTED,
    get_exit_code_for_exception, CommandError
)


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Diagnostics on stderr through logging
    - Exit code taken from the CommandError raised
    - Ctrl+C exits with 130
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            logger.error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            logger.error(str(e))
            sys.exit(e.exit_code)
        except OSError as e:
            logger.error(f"Command failed: {e}")
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


# Standard options that many commands share
common_options = {
    'json': click.option('--json', 'json_output', is_flag=True,
                         help='Output as JSONL'),
    'continue_on_error': click.option('--continue-on-error', is_flag=True,
                                      help='Warn and skip repositories that cannot be read'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('json')
        def my_command(json_output):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
