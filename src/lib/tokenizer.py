"""
Tokenizer for macro tags embedded in rich-text content

Splits a text buffer into an ordered stream of TextSegment and
MacroOccurrence events covering the entire input.

Two opening markers are recognized (case-insensitively):
    <?umbraco        processing-instruction style, e.g. <?UMBRACO_MACRO macroAlias="x" />
    <umbraco:macro   legacy element style, e.g. <umbraco:macro alias="x" />

Compatibility notes:
- The legacy marker is only searched for when no primary marker remains
  in the rest of the input. A primary tag therefore wins over an earlier
  legacy tag, which is then reported as plain text. Kept for compatibility
  with stored content; not a model for new syntaxes.
- A tag ends at the first '>' after its marker, even inside a quoted value.
- A tag that carries attributes but does not end in "/>" is a tag with
  children (as written by older editors: <?UMBRACO_MACRO ...><IMG ...></?UMBRACO_MACRO>).
  Everything up to and including the matching closing tag is dropped.

Example:
    >>> events_collect('Hello <?UMBRACO_MACRO macroAlias="weather" /> world')
    [TextSegment(text='Hello '), MacroOccurrence(alias='weather', ...), TextSegment(text=' world')]
"""

import re
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..models.tokens import SyntaxKind, TagSpan, TextSegment, MacroOccurrence, ScanEvent
from .attributes import AttributeExtractor, RegexAttributeExtractor
from .errors import MissingAliasError, MissingHandlerError, UnterminatedTagError
from .log import LOG


# Search order matters: see module notes
MARKER_PRECEDENCE: Tuple[SyntaxKind, ...] = (
    SyntaxKind.PROCESSING_INSTRUCTION,
    SyntaxKind.ELEMENT,
)

# Matched against the original text; lower-casing a copy can change its length
MARKER_PATTERNS = tuple(
    (kind, re.compile(re.escape(kind.marker), re.IGNORECASE | re.ASCII))
    for kind in MARKER_PRECEDENCE
)


def alias_resolve(attributes: Dict[str, str], tag: TagSpan) -> str:
    """
    Pick the macro alias from extracted attributes

    Prefers 'macroalias', falls back to 'alias'. Key presence decides,
    so an empty value is returned as is.

    Raises:
        MissingAliasError: If neither key exists
    """
    if 'macroalias' in attributes:
        return attributes['macroalias']
    if 'alias' in attributes:
        return attributes['alias']
    raise MissingAliasError(tag)


class Tokenizer:
    """
    Forward-only scanner over an immutable input

    Handles:
    - Primary/legacy marker precedence
    - Self-closing tags and tags with children
    - Alias resolution (macroalias, then alias)
    - Unterminated tags (fail the whole scan)
    """

    def __init__(self, extractor: Optional[AttributeExtractor] = None) -> None:
        """
        Args:
            extractor: Attribute extraction capability; defaults to
                       RegexAttributeExtractor
        """
        self.extractor: AttributeExtractor = extractor or RegexAttributeExtractor()

    def marker_find(self, text: str, position: int) -> Tuple[int, Optional[SyntaxKind]]:
        """
        Find the next opening marker at or after position

        Args:
            text: Input being scanned
            position: Cursor to search from

        Returns:
            (index, kind) of the marker, or (-1, None) if none remain
        """
        for kind, pattern in MARKER_PATTERNS:
            match = pattern.search(text, position)
            if match is not None:
                return match.start(), kind
        return -1, None

    def tag_extract(self, text: str, start: int, kind: SyntaxKind) -> TagSpan:
        """
        Cut the tag text from its marker up to and including the first '>'

        Raises:
            UnterminatedTagError: If no '>' follows the marker
        """
        end = text.find('>', start)
        if end < 0:
            raise UnterminatedTagError(text, start)

        raw_text = text[start:end + 1]
        self_closing = raw_text[-2] == '/' and ' ' in raw_text
        return TagSpan(kind=kind, self_closing=self_closing, raw_text=raw_text, position=start)

    def tagEnd_find(self, text: str, tag: TagSpan) -> int:
        """
        Position just past everything this tag consumes

        For a tag with children this is the end of its closing tag
        (e.g. </?UMBRACO_MACRO>), otherwise the end of the tag itself.
        The closing tag is matched literally, case included.
        """
        tag_end = tag.position + len(tag.raw_text)
        raw_text = tag.raw_text

        if tag.self_closing or ' ' not in raw_text:
            return tag_end

        closing_tag = '</' + raw_text[1:raw_text.index(' ')] + '>'
        closing_at = text.find(closing_tag, tag.position)
        if closing_at < 0:
            return tag_end

        LOG(f"Dropping children of {raw_text[:30]!r} up to {closing_tag}", level=3)
        return closing_at + len(closing_tag)

    def scan(self, text: str) -> Iterator[ScanEvent]:
        """
        Lazily yield text and macro events for text

        Args:
            text: Content to scan

        Yields:
            TextSegment for every run between tags (including empty runs
            before a leading tag and after a trailing one), and one
            MacroOccurrence per recognized tag

        Raises:
            UnterminatedTagError: A marker without a closing '>'
            MissingAliasError: A tag with neither macroAlias nor alias
        """
        position = 0

        while True:
            start, kind = self.marker_find(text, position)
            if kind is None:
                yield TextSegment(text[position:])
                return

            yield TextSegment(text[position:start])

            tag = self.tag_extract(text, start, kind)
            attributes = self.extractor.attributes_extract(tag.raw_text)
            alias = alias_resolve(attributes, tag)
            LOG(f"Found macro '{alias}' ({kind.name}) at position {start}", level=3)

            position = self.tagEnd_find(text, tag)
            yield MacroOccurrence(alias=alias, attributes=attributes, tag=tag)

    def macros_parse(
        self,
        text: str,
        on_text: Callable[[str], Any],
        on_macro: Callable[[str, Dict[str, str]], Any],
    ) -> None:
        """
        Scan text and report each event to the given handlers

        The whole input is scanned before any handler runs, so a failing
        scan reports nothing.

        Args:
            text: Content to scan
            on_text: Called with each text segment (possibly empty)
            on_macro: Called with (alias, attributes) for each macro tag

        Raises:
            MissingHandlerError: If either handler is missing
            UnterminatedTagError: A marker without a closing '>'
            MissingAliasError: A tag with neither macroAlias nor alias
        """
        if on_text is None or not callable(on_text):
            raise MissingHandlerError("on_text handler is required")
        if on_macro is None or not callable(on_macro):
            raise MissingHandlerError("on_macro handler is required")

        events = list(self.scan(text))
        LOG(f"Scanned {len(text)} characters into {len(events)} events", level=3)

        for event in events:
            if isinstance(event, MacroOccurrence):
                on_macro(event.alias, event.attributes)
            else:
                on_text(event.text)


_default_tokenizer = Tokenizer()


def macros_parse(
    text: str,
    on_text: Callable[[str], Any],
    on_macro: Callable[[str, Dict[str, str]], Any],
) -> None:
    """Tokenizer.macros_parse() with the default extractor"""
    _default_tokenizer.macros_parse(text, on_text, on_macro)


def events_collect(text: str) -> List[ScanEvent]:
    """Scan text with the default tokenizer and return all events"""
    return list(_default_tokenizer.scan(text))
