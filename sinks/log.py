from absl import logging as absl_logging

from .base import ISink


class LogSink(ISink):
    """Routes monitor output through absl logging instead of stdout."""
    def __init__(self, prefix: str = "[Monitor]") -> None:
        self.prefix = prefix

    def write_line(self, text: str) -> None:
        absl_logging.info("%s %s", self.prefix, text)
