import json
import logging
from os.path import exists
from typing import Dict, Tuple

from sparts_cli.exceptions import AliasError
from sparts_cli.services.alias.alias_provider import AliasProvider
from sparts_cli.services.alias.memory_provider import AliasMemoryProvider

logger = logging.getLogger(__name__)


class AliasJsonProvider(AliasProvider):
    """
    Reads aliases from a JSON object of the form {"<alias>": "<uuid>"}. The file is
    read once, on first lookup. A missing file means no aliases are defined.
    """

    def __init__(self, path: str) -> None:
        self.__path = path
        self.__provider: AliasMemoryProvider | None = None

    def lookup_alias(self, uuid: str) -> Tuple[str, bool]:
        if self.__provider is None:
            self.__provider = AliasMemoryProvider(self._read_alias_file(self.__path))
        return self.__provider.lookup_alias(uuid)

    @staticmethod
    def _read_alias_file(path: str) -> Dict[str, str]:
        if not exists(path):
            logger.info(f"Alias file {path} does not exist, no aliases defined")
            return {}
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise AliasError(f"Error processing alias file {path}: {e}")

        if not isinstance(data, dict):
            raise AliasError(f"Error processing alias file {path}: expected a JSON object")
        return {str(alias): str(value) for alias, value in data.items()}
