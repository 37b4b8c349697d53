"""
Token-stream data models

Type-safe structures produced by the Tokenizer while scanning rich-text
content for macro tags. A scan yields an ordered sequence of TextSegment
and MacroOccurrence events that covers the whole input.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Union


class SyntaxKind(Enum):
    """
    The two recognized opening markers of a macro tag
    """
    PROCESSING_INSTRUCTION = "<?umbraco"    # <?UMBRACO_MACRO macroAlias="x" />
    ELEMENT = "<umbraco:macro"              # <umbraco:macro alias="x" /> (legacy)

    @property
    def marker(self) -> str:
        """Lower-cased opening marker searched for in the input"""
        return self.value


@dataclass
class TagSpan:
    """
    A macro tag as found in the source text

    Attributes:
        kind: Which opening marker matched
        self_closing: True when the tag ends in "/>" and carries attributes
        raw_text: The tag text from "<" up to and including the first ">"
        position: Character position of the opening "<" in the scanned input

    Example:
        For source 'Hi <?UMBRACO_MACRO macroAlias="x" />':
        TagSpan(
            kind=SyntaxKind.PROCESSING_INSTRUCTION,
            self_closing=True,
            raw_text='<?UMBRACO_MACRO macroAlias="x" />',
            position=3
        )
    """
    kind: SyntaxKind
    self_closing: bool
    raw_text: str
    position: int = 0


@dataclass
class TextSegment:
    """
    A run of text between recognized tags

    Empty segments are still reported; consumers decide whether to skip them.
    """
    text: str


@dataclass
class MacroOccurrence:
    """
    One recognized macro tag and its extracted attributes

    Attributes:
        alias: Macro alias, case preserved as found
        attributes: Tag attributes with lower-cased keys in source order
                    (e.g., {"macroalias": "weather", "city": "oslo"})
        tag: The tag span the occurrence was extracted from
    """
    alias: str
    attributes: Dict[str, str] = field(default_factory=dict)
    tag: Optional[TagSpan] = None


ScanEvent = Union[TextSegment, MacroOccurrence]
