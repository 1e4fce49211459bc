import logging

from rich.console import Console
from rich.logging import RichHandler

FORMAT = "%(message)s"
# Answers go to stdout, so log records go to stderr.
logging.basicConfig(level="ERROR", format=FORMAT, datefmt="[%X]", handlers=[RichHandler(console=Console(stderr=True))])

log = logging.getLogger("suffix_rank")
log.setLevel(logging.INFO)
