"""
macrotags - Macro tag scanning and rich-text editor markup conversion

Recognizes macro placeholders in stored content and converts them between
persisted tags, editor placeholder blocks and a text/macro event stream.
"""

__version__ = "1.0.0"

from .tokenizer import Tokenizer, macros_parse, events_collect
from .codecs import (
    PersistedFormatCodec,
    EditorFormatCodec,
    editorMarkup_fromPersisted,
    persisted_fromEditorMarkup,
    alias_extract,
)
from .attributes import AttributeExtractor, RegexAttributeExtractor, attributes_extract
from .errors import MacroTagError, MissingHandlerError, MissingAliasError, UnterminatedTagError
from .converter import Converter
from .log import LOG, state_connectToLogger

__all__ = [
    "Tokenizer",
    "macros_parse",
    "events_collect",
    "PersistedFormatCodec",
    "EditorFormatCodec",
    "editorMarkup_fromPersisted",
    "persisted_fromEditorMarkup",
    "alias_extract",
    "AttributeExtractor",
    "RegexAttributeExtractor",
    "attributes_extract",
    "MacroTagError",
    "MissingHandlerError",
    "MissingAliasError",
    "UnterminatedTagError",
    "Converter",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
