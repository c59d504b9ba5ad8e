"""Editor deep links for captured source locations."""

from typing import Mapping, Protocol

from ..errors import ConfigurationError


class IDebugLinkBuilder(Protocol):
    """Builds a link that opens file:line in an external tool."""

    def build(self, file: str, line: int) -> str | None:
        """Return the link, or None if no link can be built."""
        ...


def check_template(template: str) -> str:
    """Raise ConfigurationError unless template only uses {file} and {line}."""
    try:
        template.format(file="", line=0)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigurationError(f"Invalid editor link template {template!r}: {e}") from e
    return template


class TemplateLinkBuilder:
    """
    Formats a template such as ``vscode://file/{file}:{line}``.

    ``replacements`` maps path prefixes seen at runtime (e.g. inside a
    container) to the prefixes the editor knows about. The first matching
    prefix wins.
    """

    def __init__(self, template: str, replacements: Mapping[str, str] | None = None):
        self._template = check_template(template)
        self._replacements = dict(replacements or {})

    def build(self, file: str, line: int) -> str | None:
        if not file:
            return None
        return self._template.format(file=self._remap(file), line=line)

    def _remap(self, file: str) -> str:
        for prefix, target in self._replacements.items():
            if file.startswith(prefix):
                return target + file[len(prefix):]
        return file
