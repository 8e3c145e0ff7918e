"""Generator interface shared by every feature unit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import ProjectConfig


class Generator(ABC):
    """A stateless unit that mutates a project directory for one feature.

    All state lives in the files a generator reads and writes.  Each
    generator runs at most once per scaffold.
    """

    name: str = ""

    @abstractmethod
    async def apply(self, directory: Path, config: ProjectConfig) -> None:
        """Write this feature's files and config edits into *directory*."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
