from abc import ABC
import abc
from typing import Tuple


class AliasProvider(ABC):
    """
    Abstract base class for alias lookups. An alias is a short local name for a UUID,
    used only for display purposes.
    Methods:
        lookup_alias(uuid: str) -> Tuple[str, bool]:
            Returns the alias for the UUID and whether one was found. When nothing was
            found the alias is an empty string.
    """

    @abc.abstractmethod
    def lookup_alias(self, uuid: str) -> Tuple[str, bool]:
        pass
