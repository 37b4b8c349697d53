"""
Attribute extraction for macro tags

The Tokenizer hands each tag's raw text to an AttributeExtractor and gets
back its attributes as an ordered dict with lower-cased keys. Any object
with an attributes_extract() method satisfies the protocol, so a strict
XML-based extractor can replace the permissive regex one without touching
the Tokenizer.

Example:
    >>> attributes_extract('<?UMBRACO_MACRO macroAlias="x" Foo=\\'bar\\' />')
    {'macroalias': 'x', 'foo': 'bar'}
"""

import re
from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class AttributeExtractor(Protocol):
    """Turns one tag's literal text into a key -> value mapping"""

    def attributes_extract(self, tag_text: str) -> Dict[str, str]:
        ...


class RegexAttributeExtractor:
    """
    Permissive name="value" / name='value' extractor

    - Keys are lower-cased, values kept verbatim
    - Source order is preserved; the first of duplicated keys wins
    - Unquoted values and valueless attributes are ignored
    """

    ATTRIBUTE = re.compile(
        r"""([^\s=<>"'/]+)\s*=\s*(?:"([^"]*)"|'([^']*)')"""
    )

    def attributes_extract(self, tag_text: str) -> Dict[str, str]:
        attributes: Dict[str, str] = {}
        for match in self.ATTRIBUTE.finditer(tag_text):
            key = match.group(1).lower()
            if key in attributes:
                continue
            value = match.group(2) if match.group(2) is not None else match.group(3)
            attributes[key] = value
        return attributes


_default_extractor = RegexAttributeExtractor()


def attributes_extract(tag_text: str) -> Dict[str, str]:
    """Extract attributes from tag_text with the default regex extractor"""
    return _default_extractor.attributes_extract(tag_text)
