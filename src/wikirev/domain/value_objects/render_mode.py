"""Rendering settings accepted by the wikitext renderer."""

from enum import StrEnum


class RenderMode(StrEnum):
    """Wikitext context the source is rendered in."""

    PAGE = "page"
    FORUM = "forum"
    COMMENT = "comment"


class RenderLayout(StrEnum):
    """HTML layout flavour."""

    WIKIDOT = "wikidot"
    WIKIJUMP = "wikijump"


class RenderOutputKind(StrEnum):
    """What the renderer should produce."""

    PARSE = "parse"
    HTML = "html"
    DETAIL = "detail"
    TEXT = "text"
    WORD_COUNT = "word_count"
