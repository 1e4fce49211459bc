import logging

from pydantic_settings import BaseSettings


class DebugConfig(BaseSettings):
    logging_level: int = logging.INFO
    enable_profiling: bool = False
