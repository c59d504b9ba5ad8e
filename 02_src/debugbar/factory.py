"""Opt-in default wiring for collectors."""

from .config import DEFAULT_MESSAGES_NAME, Settings, load_settings
from .exceptions import ExceptionsCollector
from .formatting import HtmlValueRenderer, ReprFormatter, TemplateLinkBuilder
from .messages import MessagesCollector


def create_messages_collector(
    name: str = DEFAULT_MESSAGES_NAME,
    settings: Settings | None = None,
) -> MessagesCollector:
    """MessagesCollector with the default formatter and, if enabled, renderer."""
    settings = settings or load_settings()
    renderer = HtmlValueRenderer() if settings.rich_rendering else None
    return MessagesCollector(formatter=ReprFormatter(), name=name, renderer=renderer)


def create_exceptions_collector(settings: Settings | None = None) -> ExceptionsCollector:
    """ExceptionsCollector configured from settings."""
    settings = settings or load_settings()
    renderer = HtmlValueRenderer() if settings.rich_rendering else None
    link_builder = TemplateLinkBuilder(settings.editor_link) if settings.editor_link else None
    return ExceptionsCollector(
        renderer=renderer,
        link_builder=link_builder,
        chain_exceptions=settings.chain_exceptions,
        max_chain_depth=settings.max_chain_depth,
    )
