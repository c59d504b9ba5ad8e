"""Static asset descriptors."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Asset:
    """A static file the rendering layer must include."""

    name: str
    kind: Literal["css", "js"]
    path: str
