import logging
import time
from logging import StreamHandler
from pathlib import Path
from typing import Any, Dict, Optional

from rich.logging import RichHandler

from pcjson._core.environment import settings

# --- Global State ---
_log_stats: Dict[str, Dict[str, int]] = {}
_session_start_time: float = time.monotonic()
_logging_configured = False
DEFAULT_LOG_LEVEL = 'INFO'


class RichLogger(logging.Logger):
    """
    Logger class that counts emitted records per level and adds a
    performance helper on top of the standard logging methods.
    """

    def _log(
        self,
        level,
        msg,
        args,
        exc_info=None,
        extra=None,
        stack_info=False,
        stacklevel=1,
        **kwargs,
    ):
        """Override internal _log to track stats before passing to parent."""
        counts = _log_stats.setdefault(
            self.name,
            {'DEBUG': 0, 'INFO': 0, 'WARNING': 0, 'ERROR': 0, 'CRITICAL': 0},
        )
        level_name = logging.getLevelName(level)
        if level_name in counts:
            counts[level_name] += 1
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel)

    def log_performance(
        self,
        operation: str,
        duration: float,
        level: int = logging.INFO,
        **metrics: Any,
    ):
        """Log performance metrics for a specific operation."""
        msg = f'⚡ Performance | {operation} | Duration: {duration:.4f}s'
        if metrics:
            metric_str = ' | '.join(f'{k}={v}' for k, v in metrics.items())
            msg += f' | {metric_str}'
        self.log(level, msg)


def configure_logging(
    level: Optional[str] = None,
    use_rich: Optional[bool] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configures the package's logging system.

    Direct arguments take priority over the global settings, which in turn
    are loaded from environment variables or .env files.

    Args:
        level: Override the log level (e.g., 'DEBUG').
        use_rich: Override the use of rich formatting.
        format_string: Override the log format string.
        file_path: Override the log file path.
        force: If True, will overwrite an existing configuration.
    """
    global _logging_configured, _session_start_time
    init_logger = logging.getLogger(__name__)

    if _logging_configured and not force:
        init_logger.debug('Logging already configured. Skipping reconfiguration.')
        return

    if not _logging_configured:
        _session_start_time = time.monotonic()

    final_level = level or settings.log_level
    # `False` is a valid override, so compare against None explicitly.
    final_use_rich = use_rich if use_rich is not None else settings.log_use_rich
    final_format_string = format_string or settings.log_format_string
    final_file_path = file_path or settings.log_file_path

    logging.setLoggerClass(RichLogger)
    root_logger = logging.getLogger()
    root_logger.setLevel(final_level.upper())

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    if final_use_rich:
        handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        formatter = logging.Formatter('%(message)s', datefmt='[%X]')
    else:
        handler = StreamHandler()
        formatter = logging.Formatter(
            final_format_string
            or '%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    if final_file_path:
        try:
            Path(final_file_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(final_file_path, mode='a')
            file_handler.setFormatter(
                logging.Formatter(
                    final_format_string
                    or '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
                )
            )
            root_logger.addHandler(file_handler)
            init_logger.debug(f'Logging also configured for file: {final_file_path}')
        except OSError as e:
            root_logger.error(
                f'Failed to configure file handler at {final_file_path}: {e}'
            )

    init_logger.debug(
        f'--- Logging configured. Level: {final_level}, Rich: {final_use_rich} ---'
    )
    _logging_configured = True


def get_logger(name: str) -> RichLogger:
    """
    Gets a logger instance. If logging is not yet configured,
    it applies a default configuration first.
    """
    if not _logging_configured:
        configure_logging()
    return logging.getLogger(name)


def log_summary():
    """Logs a summary of all logging activity during the session."""
    logger = get_logger('LoggingSummary')
    total_runtime = time.monotonic() - _session_start_time
    logger.info('--- Logging Summary ---')
    logger.info(f'Total Session Runtime: {total_runtime:.2f} seconds')
    grand_total = sum(sum(stats.values()) for stats in _log_stats.values())
    for logger_name, stats in _log_stats.items():
        total = sum(stats.values())
        if total > 0:
            logger.info(f"Logger '{logger_name}': {total} messages")
            for level, count in stats.items():
                if count > 0:
                    logger.info(f'    - {level}: {count}')
    logger.info(f'Grand Total Messages: {grand_total}')
    logger.info('-----------------------')


__all__ = [
    'configure_logging',
    'get_logger',
    'log_summary',
    'RichLogger',
]
