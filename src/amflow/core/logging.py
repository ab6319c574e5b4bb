"""Logging Configuration with pretty formatting for amflow."""

import logging
from typing import Optional, Dict
from enum import Enum, IntEnum

# ANSI Color Codes
class Colors:
    """ANSI color codes for pretty terminal output."""
    INFO = '\033[94m'        # Blue
    WARNING = '\033[93m'     # Yellow
    ERROR = '\033[91m'       # Red
    RESET = '\033[0m'        # Reset
    BOLD = '\033[1m'         # Bold
    DIM = '\033[2m'          # Dim

TIME_FORMAT = "%H:%M:%S"

# Pretty format strings
PRETTY_FORMAT = (
    "%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s"
)

DETAILED_FORMAT = (
    f"{Colors.DIM}%(asctime)s{Colors.RESET} │ "
    f"%(colored_level)-30s │ "
    f"{Colors.DIM}%(name)s{Colors.RESET} │ "
    f"%(message)s"
)

class PrettyFormatter(logging.Formatter):
    """Custom formatter with colors and level markers."""

    level_colors = {
        'DEBUG': Colors.DIM,
        'VERBOSE': Colors.DIM,
        'INFO': Colors.INFO,
        'WARNING': Colors.WARNING,
        'ERROR': Colors.ERROR,
        'CRITICAL': Colors.ERROR + Colors.BOLD,
    }

    def format(self, record):
        color = self.level_colors.get(record.levelname, Colors.RESET)
        record.colored_level = f"{color}{record.levelname}{Colors.RESET}"

        message = super().format(record)

        # Separate warnings from the build chatter around them
        if record.levelno >= logging.WARNING:
            message = f"{message}\n{Colors.DIM}{'─' * 80}{Colors.RESET}"

        return message

class LogComponent(str, Enum):
    """Components that can be logged."""
    DOCUMENT = "amflow.core.document"
    GRAPH = "amflow.core.graph"
    BUILDER = "amflow.core.graph.builder"
    TOPOLOGY = "amflow.core.graph.topology"
    EXPORT = "amflow.core.graph.viz"
    CONFIG = "amflow.core.config"

class LogLevel(IntEnum):
    """Log levels mapped to logging module levels."""
    DEBUG = logging.DEBUG
    VERBOSE = 15  # Per-edge build decisions
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

logging.addLevelName(LogLevel.VERBOSE, "VERBOSE")

def configure_logging(
    default_level: LogLevel = LogLevel.INFO,
    component_levels: Optional[Dict[LogComponent, LogLevel]] = None,
    pretty: bool = True,
    log_file: Optional[str] = None
) -> None:
    """Configure logging with pretty formatting.

    Only the ``amflow`` logger hierarchy is touched, so applications embedding
    the library keep their own root configuration.

    Args:
        default_level: Level applied to the ``amflow`` logger
        component_levels: Optional per-component overrides
        pretty: Use the colored console formatter
        log_file: Optional path for an additional plain-text log file
    """
    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        PrettyFormatter(DETAILED_FORMAT, datefmt=TIME_FORMAT)
        if pretty else logging.Formatter(PRETTY_FORMAT)
    )
    handlers.append(console_handler)

    # File handler if specified (without colors)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(PRETTY_FORMAT))
        handlers.append(file_handler)

    package_logger = logging.getLogger("amflow")
    package_logger.setLevel(default_level.value)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    for handler in handlers:
        package_logger.addHandler(handler)

    for component, level in (component_levels or {}).items():
        logging.getLogger(component.value).setLevel(level.value)

def get_logger(component: LogComponent) -> logging.Logger:
    """Get a logger for a specific component."""
    return logging.getLogger(component.value)

def log_verbose(logger: logging.Logger, message: str) -> None:
    """Log a message at VERBOSE level."""
    if logger.isEnabledFor(LogLevel.VERBOSE):
        logger.log(LogLevel.VERBOSE, message)
