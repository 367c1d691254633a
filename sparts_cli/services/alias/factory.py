from sparts_cli.config import Config
from sparts_cli.services.alias.alias_provider import AliasProvider
from sparts_cli.services.alias.json_provider import AliasJsonProvider
from sparts_cli.services.alias.memory_provider import AliasMemoryProvider


class AliasProviderFactory:
    def __init__(self, config: Config) -> None:
        self.__alias_config = config.alias

    def create(self) -> AliasProvider:
        if self.__alias_config.path is not None:
            return AliasJsonProvider(self.__alias_config.path)
        return AliasMemoryProvider()
