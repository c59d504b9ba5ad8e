"""Rich (HTML) value rendering."""

import html
import pprint
from typing import Any, Protocol

from ..config import RESOURCES_DIR
from ..models import Asset


class IRichValueRenderer(Protocol):
    """Renders values as HTML and declares the assets that HTML needs."""

    def render(self, value: Any) -> str:
        """Render value as an HTML fragment."""
        ...

    def get_assets(self) -> list[Asset]:
        """Static assets required by rendered fragments."""
        ...


class HtmlValueRenderer:
    """Escaped, pretty-printed <pre> blocks."""

    css_class = "debugbar-dump"

    def __init__(self, width: int = 100, depth: int | None = 6):
        self._width = width
        self._depth = depth

    def render(self, value: Any) -> str:
        """Render value as an HTML fragment."""
        text = pprint.pformat(
            value, width=self._width, depth=self._depth, sort_dicts=False
        )
        return f'<pre class="{self.css_class}">{html.escape(text)}</pre>'

    def get_assets(self) -> list[Asset]:
        """Static assets required by rendered fragments."""
        return [Asset(name="dump.css", kind="css", path=str(RESOURCES_DIR / "dump.css"))]
