import platform

from .logger import log


def check_env() -> None:
    import psutil

    log.info(f"Python: {platform.python_implementation()} {platform.python_version()}")
    log.info(f"CPU count: {psutil.cpu_count()}")
    log.info(f"Available memory: {psutil.virtual_memory().available / 1024 / 1024 / 1024:.2f} GB")
