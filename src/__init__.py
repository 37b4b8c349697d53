"""
macrotags - Macro tag scanning and rich-text editor markup conversion

Converts macro placeholders between the stored tag format, the rich-text
editor's placeholder blocks and a text/macro event stream for renderers.
"""

__version__ = "1.0.0"

from .lib import (
    Tokenizer,
    PersistedFormatCodec,
    EditorFormatCodec,
    macros_parse,
    events_collect,
    editorMarkup_fromPersisted,
    persisted_fromEditorMarkup,
    MacroTagError,
    LOG,
    state_connectToLogger,
)
from .models import TextSegment, MacroOccurrence

__all__ = [
    "Tokenizer",
    "PersistedFormatCodec",
    "EditorFormatCodec",
    "macros_parse",
    "events_collect",
    "editorMarkup_fromPersisted",
    "persisted_fromEditorMarkup",
    "MacroTagError",
    "TextSegment",
    "MacroOccurrence",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
