"""
Standard exit codes and error types for commitgrid commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
REPOSITORY_ERROR = 65    # A repository could not be opened or its log read
CONFIG_ERROR = 66        # Configuration or email allow-list file error
PERMISSION_ERROR = 67    # Insufficient permissions
DATA_ERROR = 70          # Registry file could not be read or written
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': GENERAL_ERROR,
    'PermissionError': PERMISSION_ERROR,
    'ValueError': DATA_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, CommandError):
        return exc.exit_code
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class ScanError(CommandError):
    """Raised when the filesystem walk hits an unreadable or vanished entry."""
    def __init__(self, message: str, path: Optional[str] = None, permission: bool = False):
        super().__init__(message, PERMISSION_ERROR if permission else GENERAL_ERROR)
        self.path = path


class RegistryError(CommandError):
    """Raised when the registry file cannot be read or written."""
    def __init__(self, message: str):
        super().__init__(message, DATA_ERROR)


class RepositoryError(CommandError):
    """Raised when a repository cannot be opened, its HEAD resolved or its log read."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, REPOSITORY_ERROR)
        self.path = path


class EmailFileError(CommandError):
    """Raised when the email allow-list file cannot be opened."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class ConfigError(CommandError):
    """Raised when there's a configuration error."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)
