import logging
import sys
from typing import Optional

_config = None

def _get_config():
    global _config
    if _config is None:
        from strip_codeblocks.config import config
        _config = config
    return _config


class ColoredFormatter(logging.Formatter):
    
    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
    }
    
    SYMBOLS = {
        'DEBUG': '·',
        'INFO': '✓',
        'WARNING': '⚠',
        'ERROR': '✗',
        'CRITICAL': '‼',
    }
    
    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color
    
    def format(self, record: logging.LogRecord) -> str:
        symbol = self.SYMBOLS.get(record.levelname, '')
        original_msg = record.msg
        
        if self.use_color:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            record.msg = f"{color}{symbol} {original_msg}{self.COLORS['RESET']}"
        else:
            record.msg = f"{symbol} {original_msg}"
        
        try:
            return super().format(record)
        finally:
            record.msg = original_msg


def _stream_is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    config = _get_config()
    
    log_level = level or config.LOG_LEVEL
    log_file_path = log_file or config.LOG_FILE
    
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    
    if logger.handlers:
        return logger

    # stdout carries stripped text from the CLI
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(
        fmt="%(asctime)s - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
        use_color=_stream_is_tty(sys.stderr),
    ))
    logger.addHandler(console_handler)

    if log_file_path:
        try:
            full_log_path = config.get_project_root() / log_file_path
            full_log_path.parent.mkdir(parents=True, exist_ok=True)
            
            file_handler = logging.FileHandler(full_log_path, mode='a')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")
    
    return logger


def get_logger(name: str) -> logging.Logger:
    return setup_logger(name)
