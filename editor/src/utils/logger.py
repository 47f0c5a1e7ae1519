"""Global error surfacing for the editor UI"""
import sys
import logging
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None
_logger = logging.getLogger('ShapeEditor')


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Log an exception, show it to the user in packaged builds, then raise it

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE the exception is raised straight away (full traceback).
    Otherwise it is logged with its traceback and shown in a critical
    message box parented to the main window before being re-raised.
    """
    if DEBUG_MODE:
        raise e

    _logger.error(f"{title}: {e}", exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"Error popup (no window): {title} - {message}")

    raise e
