"""LinkOccurrence model (UNO: single model)."""

from dataclasses import dataclass

from .SourceFile import SourceFile


@dataclass(frozen=True)
class LinkOccurrence:
    """An inline ``[text](target)`` link found in a source file.

    ``offset`` is the character offset of ``full_match`` in the file text,
    used to replace exactly this occurrence when rewriting.
    """

    source: SourceFile
    text: str
    target: str
    offset: int
    full_match: str
    line_number: int

    @property
    def path_part(self) -> str:
        return self.target.split("#", 1)[0]

    @property
    def anchor(self) -> str | None:
        if "#" not in self.target:
            return None
        fragment = self.target.split("#", 1)[1]
        return fragment or None
