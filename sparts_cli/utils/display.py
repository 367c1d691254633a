import logging
import sys
from typing import TextIO

from sparts_cli.exceptions import LedgerError

logger = logging.getLogger(__name__)

CYAN_FG = "\033[36m"
RED_FG = "\033[31m"
COLOR_END = "\033[0m"
ALIAS_TOKEN = "@"


class Colors:
    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def cyan(self, text: str) -> str:
        return self.__wrap(CYAN_FG, text)

    def red(self, text: str) -> str:
        return self.__wrap(RED_FG, text)

    def __wrap(self, color: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{color}{text}{COLOR_END}"


class ErrorDisplay:
    """
    The one place where errors are turned into text for the user. Details of the
    underlying cause are only written when debug is on.
    """

    def __init__(
        self,
        debug: bool = False,
        colors: Colors | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.debug = debug
        self.__colors = colors or Colors()
        self.__stream = stream

    @property
    def stream(self) -> TextIO:
        return self.__stream if self.__stream is not None else sys.stderr

    def display_error_msg(self, message: str, detail: str | None = None) -> None:
        print(f"  {self.__colors.red('error:')} {message}", file=self.stream)
        if self.debug and detail:
            print(f"  detail: {detail}", file=self.stream)

    def check_and_report_error(self, error: Exception | None) -> bool:
        """
        Reports the error when there is one, returns whether it did.
        """
        if error is None:
            return False
        if isinstance(error, LedgerError):
            self.display_error_msg(error.message, error.detail)
        else:
            logger.debug(f"Unexpected error: {error!r}")
            self.display_error_msg(str(error))
        return True
