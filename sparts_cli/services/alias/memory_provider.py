from typing import Dict, Tuple

from sparts_cli.services.alias.alias_provider import AliasProvider


class AliasMemoryProvider(AliasProvider):
    def __init__(self, aliases: Dict[str, str] | None = None) -> None:
        # alias name -> uuid
        self.__aliases = dict(aliases or {})

    def lookup_alias(self, uuid: str) -> Tuple[str, bool]:
        for alias, value in self.__aliases.items():
            if value == uuid:
                return alias, True
        return "", False
