"""FixRecord model (UNO: single model)."""

from dataclasses import dataclass

from .SourceFile import SourceFile


@dataclass(frozen=True)
class FixRecord:
    """A rewrite of one broken link.

    Identical whether the rewrite is applied or only planned (dry-run).
    """

    source: SourceFile
    link_text: str
    old_target: str
    new_target: str
    anchor: str | None
    offset: int
    old_markdown: str

    @property
    def new_markdown(self) -> str:
        return f"[{self.link_text}]({self.new_target})"

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.source.relative_path,
            "text": self.link_text,
            "from": self.old_target,
            "to": self.new_target,
            "anchor": self.anchor,
        }
