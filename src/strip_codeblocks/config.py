import codecs
import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)


class Config:
    LOG_LEVEL: str = os.getenv("STRIP_CODEBLOCKS_LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("STRIP_CODEBLOCKS_LOG_FILE") or None
    LOG_FORMAT: str = os.getenv(
        "STRIP_CODEBLOCKS_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # CLI file handling
    ENCODING: str = os.getenv("STRIP_CODEBLOCKS_ENCODING", "utf-8")
    MAX_FILE_SIZE_KB: int = int(os.getenv("STRIP_CODEBLOCKS_MAX_FILE_SIZE_KB", "1024"))

    @classmethod
    def validate(cls) -> bool:
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            raise ValueError(f"Unknown log level: {cls.LOG_LEVEL}")
        if cls.MAX_FILE_SIZE_KB <= 0:
            raise ValueError("STRIP_CODEBLOCKS_MAX_FILE_SIZE_KB must be positive")
        try:
            codecs.lookup(cls.ENCODING)
        except LookupError:
            raise ValueError(f"Unknown encoding: {cls.ENCODING}")
        return True

    @classmethod
    def get_project_root(cls) -> Path:
        return Path.cwd()


config = Config()
