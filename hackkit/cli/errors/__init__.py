from .error_handler import cli_hackkit_error_handler

__all__ = ["cli_hackkit_error_handler"]
