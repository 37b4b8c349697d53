"""
Conversions between persisted macro tags and rich-text editor markup

Content is stored with compact macro tags:

    <?UMBRACO_MACRO macroAlias="myMacro" city="oslo" />

The rich-text editor instead shows a labeled placeholder block that keeps
the stored tag inside an HTML comment:

    <div class="umb-macro-holder" data-load-content="false">
    <!-- <?UMBRACO_MACRO macroAlias="myMacro" city="oslo" /> -->
    Macro alias: <strong>myMacro</strong></div>

PersistedFormatCodec builds the block, EditorFormatCodec strips it back
to the tag. Anything else in the input passes through untouched, and
neither codec raises on input without macros.
"""

import re
from typing import Dict, Optional

from ..config import AppSettings, appsettings
from .log import LOG


PERSISTED_FORMAT = re.compile(
    r"""<\?UMBRACO_MACRO macroAlias=["'](\w+?)["'].*?/>""",
    re.IGNORECASE | re.DOTALL,
)


def editorPattern_make(holder_class: str) -> re.Pattern:
    """
    Build the editor wrapper pattern for a holder class name

    Groups:
        1: block opening up to the comment start
        2: the embedded persisted tag
        3: rest of the block up to </div>
    """
    # The holder class must be a whole entry of the class list
    return re.compile(
        r"""(<div[^>]*?class=["'](?:[^"']*?\s)?"""
        + re.escape(holder_class)
        + r"""(?=[\s"'])[^"']*?["'].*?>.*?<!--\s*?)(<\?UMBRACO_MACRO.*?/>)(.*?</div>)""",
        re.IGNORECASE | re.DOTALL,
    )


class PersistedFormatCodec:
    """Persisted macro tags -> editor placeholder blocks"""

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings

    def wrapper_make(self, match: re.Match, html_attributes: Dict[str, str]) -> str:
        """Render one editor block for a persisted-tag match"""
        if len(match.groups()) < 1:
            # Replace with nothing if the syntax could not be found
            return ""

        opening = f'<div class="{self.settings.holder_class}"'
        for key, value in html_attributes.items():
            opening += f' {key}="{value}"'

        return (
            f"{opening}>\n"
            f"<!-- {match.group(0)} -->\n"
            f"{self.settings.alias_label}<strong>{match.group(1)}</strong></div>"
        )

    def editorMarkup_make(
        self, persisted: str, html_attributes: Optional[Dict[str, str]] = None
    ) -> str:
        """
        Replace every persisted macro tag with an editor placeholder block

        Args:
            persisted: Stored content containing macro tags
            html_attributes: Extra attributes for the block's div, rendered
                             as key="value" in iteration order

        Returns:
            Content with each tag wrapped for the editor

        Example:
            >>> PersistedFormatCodec().editorMarkup_make(
            ...     '<?UMBRACO_MACRO macroAlias="x"/>', {"data-load-content": "false"})
            '<div class="umb-macro-holder" data-load-content="false">\\n<!-- <?UMBRACO_MACRO macroAlias="x"/> -->\\nMacro alias: <strong>x</strong></div>'
        """
        attributes = html_attributes or {}
        result, count = PERSISTED_FORMAT.subn(
            lambda match: self.wrapper_make(match, attributes), persisted
        )
        LOG(f"Wrapped {count} persisted macro tags for the editor", level=3)
        return result

    def alias_extract(self, tag_text: str) -> Optional[str]:
        """
        Alias of the first persisted macro tag in tag_text

        Only word-character aliases are recognized.

        Returns:
            The alias, or None if tag_text holds no persisted tag
        """
        match = PERSISTED_FORMAT.search(tag_text)
        if match is None:
            return None
        return match.group(1)


class EditorFormatCodec:
    """Editor placeholder blocks -> persisted macro tags"""

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings
        self.pattern = editorPattern_make(self.settings.holder_class)

    def tag_unwrap(self, match: re.Match) -> str:
        """Keep only the persisted tag embedded in one editor block"""
        if len(match.groups()) < 3:
            return ""
        return match.group(2)

    def persisted_make(self, editor_html: str) -> str:
        """
        Replace every editor placeholder block with its embedded macro tag

        The block's preview content (whatever follows the comment) is
        discarded; it is regenerated the next time the content is opened
        in the editor.

        Args:
            editor_html: Content posted back from the rich-text editor

        Returns:
            Content in persisted form
        """
        result, count = self.pattern.subn(self.tag_unwrap, editor_html)
        LOG(f"Unwrapped {count} editor macro blocks", level=3)
        return result


def editorMarkup_fromPersisted(
    persisted: str, html_attributes: Optional[Dict[str, str]] = None
) -> str:
    """PersistedFormatCodec.editorMarkup_make() with the application settings"""
    return PersistedFormatCodec().editorMarkup_make(persisted, html_attributes)


def persisted_fromEditorMarkup(editor_html: str) -> str:
    """EditorFormatCodec.persisted_make() with the application settings"""
    return EditorFormatCodec().persisted_make(editor_html)


def alias_extract(tag_text: str) -> Optional[str]:
    """Alias of the first persisted macro tag in tag_text, or None"""
    return PersistedFormatCodec().alias_extract(tag_text)
