"""
Exceptions raised while scanning macro markup
"""

from typing import Optional

from ..models.tokens import TagSpan


class MacroTagError(Exception):
    """Base class for macro scanning failures"""
    pass


class MissingHandlerError(MacroTagError, TypeError):
    """Raised when a text or macro handler is absent at scan start"""
    pass


class MissingAliasError(MacroTagError, KeyError):
    """
    Raised when a recognized tag has neither a macroAlias nor an alias attribute

    Attributes:
        tag: The offending tag span
    """

    def __init__(self, tag: TagSpan) -> None:
        self.tag = tag
        super().__init__(
            f"Macro tag at position {tag.position} has no 'macroAlias' or "
            f"'alias' attribute: {tag.raw_text}"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UnterminatedTagError(MacroTagError, SyntaxError):
    """
    Raised when an opening macro marker has no closing '>' after it

    The message carries line number, position and source context with a
    caret under the opening marker.

    Attributes:
        position: Character position of the opening marker
        line_number: 1-based line of the opening marker
    """

    def __init__(self, source: str, position: int, message: Optional[str] = None) -> None:
        self.position = position
        self.line_number = source.count('\n', 0, position) + 1

        context_start = max(0, position - 40)
        context_end = min(len(source), position + 40)
        context = source[context_start:context_end].replace('\n', ' ')

        super().__init__(
            f"\n{message or 'Unterminated macro tag (no closing >)'}\n"
            f"Line {self.line_number}, position {position}\n"
            f"Context: ...{context}...\n"
            f"            {' ' * (position - context_start)}^"
        )
