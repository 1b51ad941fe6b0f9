from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol
from models.enums import LogLevel, LogCategory


# === ANSI COLORS ===
class Colors:
    """ANSI escape codes for colored terminal output"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    WHITE = '\033[37m'

    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.BRIGHT_CYAN,
    LogCategory.COLOR: Colors.BRIGHT_MAGENTA,
    LogCategory.LOCATION: Colors.GREEN,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

LEVEL_SYMBOLS = {
    LogLevel.DEBUG: '·',
    LogLevel.INFO: '✓',
    LogLevel.WARN: '⚠',
    LogLevel.ERROR: '✗',
}

LEVEL_COLORS = {
    LogLevel.DEBUG: Colors.DIM,
    LogLevel.INFO: Colors.GREEN,
    LogLevel.WARN: Colors.YELLOW,
    LogLevel.ERROR: Colors.RED,
}


@dataclass(frozen=True)
class LogEntry:
    """One structured log record as delivered to a sink"""
    level: LogLevel
    message: str
    source: Optional[str]
    category: LogCategory = LogCategory.GENERAL


class LogSink(Protocol):
    """Anything that wants structured records next to the console output"""
    def emit(self, entry: LogEntry) -> None: ...


class LogCapture:
    """
    Sink that keeps every record in memory

    Example:
        capture = LogCapture()
        logger = Logger(echo=False)
        logger.set_broadcaster(capture)
        ...
        assert capture.entries == [LogEntry(LogLevel.WARN, "...", "Pixel Location Manager", LogCategory.LOCATION)]
    """

    def __init__(self):
        self.entries: List[LogEntry] = []

    def emit(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def clear(self) -> None:
        self.entries.clear()


# === CORE LOGGER ===
class Logger:
    """
    Structured logger with compact output format

    Format:
    [HH:MM:SS] CATEGORY · Message
               └─ Detail 1
               └─ Detail 2

    Example:
    [14:23:45] LOCATION  ⚠ No LED locations defined, ...
               └─ source: Pixel Location Manager
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True, echo: bool = True):
        """
        Initialize logger

        Args:
            min_level: Minimum log level to display
            use_colors: Enable ANSI color codes (disable for file output)
            echo: Print records to stdout (sinks receive records either way)
        """
        self.min_level = min_level
        self.use_colors = use_colors
        self.echo = echo
        self._level_priority = {
            LogLevel.DEBUG: 0,
            LogLevel.INFO: 1,
            LogLevel.WARN: 2,
            LogLevel.ERROR: 3,
        }
        self._broadcaster: Optional[LogSink] = None

    def _should_log(self, level: LogLevel) -> bool:
        """Check if message should be logged based on level"""
        return self._level_priority[level] >= self._level_priority[self.min_level]

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors enabled"""
        if not self.use_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _format_timestamp(self) -> str:
        """Format current time as [HH:MM:SS]"""
        return datetime.now().strftime('[%H:%M:%S]')

    def _format_category(self, category: LogCategory) -> str:
        """Format category name with color"""
        color = CATEGORY_COLORS.get(category, Colors.WHITE)
        return self._colorize(category.name.ljust(9), color)

    def _format_level_symbol(self, level: LogLevel) -> str:
        """Format level symbol with color"""
        symbol = LEVEL_SYMBOLS.get(level, '·')
        return self._colorize(symbol, LEVEL_COLORS.get(level, Colors.WHITE))

    def set_broadcaster(self, broadcaster: Optional[LogSink]) -> None:
        """
        Attach a sink that receives every emitted record.

        Args:
            broadcaster: LogSink instance, or None to detach
        """
        self._broadcaster = broadcaster

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        source: Optional[str] = None,
        **kwargs
    ):
        """
        Log a structured message

        Args:
            category: Log category (LOCATION, COLOR, etc.)
            message: Main message text
            level: Log level (DEBUG, INFO, WARN, ERROR)
            details: List of detail strings to show below message
            source: Tag naming the component that emitted the record
            **kwargs: Additional key-value pairs to show as details

        Example:
            logger.log(
                LogCategory.COLOR,
                "Prepared palette",
                num_leds=60,
                colors=3
            )

            Output:
            [14:23:45] COLOR     ✓ Prepared palette
                       ├─ num_leds: 60
                       └─ colors: 3
        """
        if not self._should_log(level):
            return

        all_details = list(details or [])
        if source:
            all_details.append(f"source: {source}")
        for k, v in kwargs.items():
            all_details.append(f"{k}: {v}")

        if self.echo:
            timestamp = self._format_timestamp()
            cat = self._format_category(category)
            sym = self._format_level_symbol(level)
            msg = self._colorize(message, LEVEL_COLORS.get(level, Colors.WHITE))

            print(f"{timestamp} {cat} {sym} {msg}")

            # Print details with tree structure
            if all_details:
                indent = " " * 11
                for i, d in enumerate(all_details):
                    # Last item gets different tree character
                    tree = "└─" if i == len(all_details) - 1 else "├─"
                    print(f"{indent}{self._colorize(tree, Colors.DIM)} {d}")

        if self._broadcaster:
            self._broadcaster.emit(LogEntry(level=level, message=message, source=source, category=category))

    # === Level helpers ===
    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    # === Contextual logger creation ===
    def for_category(self, category: LogCategory, source: Optional[str] = None) -> 'BoundLogger':
        """Return a contextual logger bound to a specific category (and optionally a source tag)."""
        return BoundLogger(self, category, source)


class BoundLogger:
    """Logger bound to a default category and source, with ability to override if needed."""

    def __init__(self, base: Logger, category: LogCategory, source: Optional[str] = None):
        self._base = base
        self._category = category
        self._source = source

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        """Allows overriding category if necessary."""
        kw.setdefault("source", self._source)
        self._base.log(category or self._category, message, level, **kw)

    # Shortcut methods
    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        """Create another bound logger from this one."""
        return BoundLogger(self._base, category, self._source)


# === Global instance helpers ===
_logger = Logger()

def get_logger() -> Logger:
    return _logger

def get_category_logger(category: LogCategory) -> BoundLogger:
    """Returns a logger bound to a specific category"""
    return _logger.for_category(category)

def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True, echo: bool = True):
    """
    Configure the logger singleton (modify in-place, don't create new instance).

    Updates properties on the existing instance rather than replacing it, so
    bound loggers and attached sinks created earlier remain valid.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.echo = echo
