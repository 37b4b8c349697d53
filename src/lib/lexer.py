"""
Pygments lexer for macro markup

Highlights persisted macro tags and editor placeholder blocks when the
command line shows converted content.

Token types:
- Keyword.Declaration: Macro tag names (UMBRACO_MACRO, umbraco:macro)
- Name.Attribute: Attribute names (e.g., macroAlias)
- String: Quoted attribute values
- Comment: HTML comments (macro tags inside them are still highlighted)
- Name.Builtin: Any other HTML tag
- Punctuation: Tag delimiters
"""

import re
from typing import Optional

from pygments import highlight
from pygments.formatter import Formatter
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups, include
from pygments.token import Text, Punctuation, Name, String, Keyword, Comment


class MacroMarkupLexer(RegexLexer):
    """
    Lexer for content holding macro tags

    Example:
        <!-- <?UMBRACO_MACRO macroAlias="weather" /> -->

    Tokens:
        <!-- → Comment
        <? → Punctuation
        UMBRACO_MACRO → Keyword.Declaration
        macroAlias → Name.Attribute
        "weather" → String
        /> → Punctuation
    """

    name = 'Macro markup'
    aliases = ['macromarkup', 'umbraco-macro']
    filenames = []

    flags = re.IGNORECASE | re.MULTILINE

    tokens = {
        'macros': [
            (r'(<\?)(umbraco_macro)\b', bygroups(Punctuation, Keyword.Declaration), 'tag'),
            (r'(<)(umbraco:macro)\b', bygroups(Punctuation, Keyword.Declaration), 'tag'),
            (r'(</\??)(umbraco_macro|umbraco:macro)(>)',
             bygroups(Punctuation, Keyword.Declaration, Punctuation)),
        ],

        'root': [
            (r'<!--', Comment, 'comment'),
            include('macros'),
            (r'<[^>]+>', Name.Builtin),
            (r'[^<]+', Text),
            (r'<', Text),
        ],

        'comment': [
            (r'-->', Comment, '#pop'),
            include('macros'),
            (r'[^-<]+', Comment),
            (r'[-<]', Comment),
        ],

        'tag': [
            (r'\s+', Text),
            (r'([\w:.-]+)(\s*=\s*)("[^"]*"|\'[^\']*\')',
             bygroups(Name.Attribute, Punctuation, String)),
            (r'/?>', Punctuation, '#pop'),
            (r'[^\s>/]+', Text),
            (r'/', Text),
        ],
    }


def markup_highlight(text: str, formatter: Optional[Formatter] = None) -> str:
    """
    Highlight macro markup

    Args:
        text: Persisted or editor content
        formatter: Pygments formatter (default: TerminalFormatter)

    Returns:
        Formatted text
    """
    return highlight(text, MacroMarkupLexer(), formatter or TerminalFormatter())
