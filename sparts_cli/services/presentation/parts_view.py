import sys
from typing import List, TextIO

from sparts_cli.models.supplier.dto import Part
from sparts_cli.services.alias.alias_provider import AliasProvider
from sparts_cli.utils.display import ALIAS_TOKEN
from sparts_cli.utils.table import TabWriter


class PartsView:
    def __init__(self, alias_provider: AliasProvider, out: TextIO | None = None) -> None:
        self.__alias_provider = alias_provider
        self.__out = out

    @property
    def out(self) -> TextIO:
        return self.__out if self.__out is not None else sys.stdout

    def display_parts(self, parts: List[Part]) -> None:
        # resolve every alias before anything is written
        aliases = [self.__alias_provider.lookup_alias(part.part_id) for part in parts]

        print("  Parts  :", file=self.out)
        w = TabWriter(self.out, padding=1, debug=True)
        w.write("\t%s\t %s\n" % (" Part UUID", "Alias"))
        for part, (alias, found) in zip(parts, aliases):
            w.write("\t %s\t %s\n" % (part.part_id, ALIAS_TOKEN + alias if found else "-"))
        w.flush()
