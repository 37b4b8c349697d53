"""
Models package for macrotags

Contains data structures and type definitions for scanning and conversion.
"""

from .state import ProgramState, pipeline
from .tokens import SyntaxKind, TagSpan, TextSegment, MacroOccurrence, ScanEvent

__all__ = [
    "ProgramState",
    "pipeline",
    "SyntaxKind",
    "TagSpan",
    "TextSegment",
    "MacroOccurrence",
    "ScanEvent",
]
