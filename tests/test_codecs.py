"""
Codec tests - persisted tags <-> editor placeholder blocks
"""

import pytest

from macrotags.config import AppSettings
from macrotags.lib.codecs import (
    PersistedFormatCodec,
    EditorFormatCodec,
    editorMarkup_fromPersisted,
    persisted_fromEditorMarkup,
    alias_extract,
)


class TestPersistedToEditor:
    """editorMarkup_make() wraps persisted tags"""

    def test_wrapper_with_attributes(self):
        """Attributes follow the class marker; alias is emphasized"""
        result = editorMarkup_fromPersisted(
            '<?UMBRACO_MACRO macroAlias="x"/>', {"data-load-content": "false"}
        )

        assert result == (
            '<div class="umb-macro-holder" data-load-content="false">\n'
            '<!-- <?UMBRACO_MACRO macroAlias="x"/> -->\n'
            'Macro alias: <strong>x</strong></div>'
        )

    def test_attribute_order_kept(self):
        """html attributes render in iteration order"""
        result = editorMarkup_fromPersisted(
            '<?UMBRACO_MACRO macroAlias="x" />', {"b": "2", "a": "1"}
        )
        assert '<div class="umb-macro-holder" b="2" a="1">' in result

    def test_no_attributes(self):
        """None or empty attributes give a bare class marker"""
        for attributes in (None, {}):
            result = editorMarkup_fromPersisted('<?UMBRACO_MACRO macroAlias="x" />', attributes)
            assert result.startswith('<div class="umb-macro-holder">\n')

    def test_whole_tag_in_comment(self):
        """The entire tag, with all attributes, goes into the comment"""
        tag = '<?UMBRACO_MACRO macroAlias="weather" city="oslo" />'
        result = editorMarkup_fromPersisted(tag)
        assert f"<!-- {tag} -->" in result

    def test_surrounding_text_unchanged(self):
        """Text around tags passes through"""
        result = editorMarkup_fromPersisted(
            '<p>Hi</p><?UMBRACO_MACRO macroAlias="a" /><p>Mid</p>'
            "<?UMBRACO_MACRO macroAlias='b' /><p>End</p>"
        )

        assert result.startswith("<p>Hi</p><div")
        assert "</div><p>Mid</p><div" in result
        assert result.endswith("<strong>b</strong></div><p>End</p>")
        assert result.count('class="umb-macro-holder"') == 2

    def test_case_insensitive(self):
        """Tag name and attribute name match in any case"""
        result = editorMarkup_fromPersisted('<?umbraco_macro MACROALIAS="x" />')
        assert "<strong>x</strong>" in result

    def test_no_match_is_noop(self):
        """Content without persisted tags is returned unchanged"""
        source = "<p>Nothing here</p> <umbraco:macro alias='legacy' />"
        assert editorMarkup_fromPersisted(source) == source

    def test_non_word_alias_not_matched(self):
        """Aliases with non-word characters are not recognized"""
        source = '<?UMBRACO_MACRO macroAlias="my-macro" />'
        assert editorMarkup_fromPersisted(source) == source

    def test_label_from_settings(self):
        """Holder class and label come from settings"""
        settings = AppSettings(holder_class="macro-box", alias_label="Macro: ")
        result = PersistedFormatCodec(settings).editorMarkup_make(
            '<?UMBRACO_MACRO macroAlias="x" />'
        )

        assert result.startswith('<div class="macro-box">')
        assert "Macro: <strong>x</strong>" in result


class TestAliasExtract:
    """alias_extract() reads the first persisted tag"""

    def test_alias(self):
        assert alias_extract('<?UMBRACO_MACRO macroAlias="news" count="3" />') == "news"

    def test_single_quoted(self):
        assert alias_extract("<?UMBRACO_MACRO macroAlias='news'/>") == "news"

    def test_not_found(self):
        assert alias_extract("<p>plain</p>") is None
        assert alias_extract('<?UMBRACO_MACRO macroAlias="bad alias" />') is None


class TestEditorToPersisted:
    """persisted_make() unwraps editor blocks"""

    def test_unwrap_block(self):
        """Only the embedded tag survives"""
        html = (
            '<p>a</p><div class="umb-macro-holder" data-load-content="false">\n'
            '<!-- <?UMBRACO_MACRO macroAlias="x" city="oslo" /> -->\n'
            '<img src="preview.png"/> rendered preview</div><p>b</p>'
        )

        assert persisted_fromEditorMarkup(html) == (
            '<p>a</p><?UMBRACO_MACRO macroAlias="x" city="oslo" /><p>b</p>'
        )

    def test_single_quoted_class(self):
        """Class marker may use single quotes"""
        html = "<div class='umb-macro-holder'><!--<?UMBRACO_MACRO macroAlias=\"x\" />--></div>"
        assert persisted_fromEditorMarkup(html) == '<?UMBRACO_MACRO macroAlias="x" />'

    def test_marker_among_other_classes(self):
        """The holder class may be one of several"""
        html = (
            '<DIV id="m1" class="mceNonEditable umb-macro-holder">'
            '<!-- <?UMBRACO_MACRO macroAlias="x" /> --></DIV>'
        )
        assert persisted_fromEditorMarkup(html) == '<?UMBRACO_MACRO macroAlias="x" />'

    def test_multiple_blocks_non_greedy(self):
        """Each block is unwrapped on its own"""
        html = (
            '<div class="umb-macro-holder"><!-- <?UMBRACO_MACRO macroAlias="a" /> -->A</div>'
            "<p>between</p>"
            '<div class="umb-macro-holder"><!-- <?UMBRACO_MACRO macroAlias="b" /> -->B</div>'
        )

        assert persisted_fromEditorMarkup(html) == (
            '<?UMBRACO_MACRO macroAlias="a" /><p>between</p><?UMBRACO_MACRO macroAlias="b" />'
        )

    def test_marker_followed_by_other_class(self):
        """The holder class may come before other classes"""
        html = (
            '<div class="umb-macro-holder mceNonEditable">'
            '<!-- <?UMBRACO_MACRO macroAlias="x" /> --></div>'
        )
        assert persisted_fromEditorMarkup(html) == '<?UMBRACO_MACRO macroAlias="x" />'

    @pytest.mark.parametrize("css_class", [
        "xumb-macro-holder",
        "umb-macro-holder-old",
        "legacy xumb-macro-holder-old",
    ])
    def test_similar_class_names_untouched(self, css_class):
        """Only a whole holder class entry marks a block"""
        html = (
            f'<div class="{css_class}">'
            '<!-- <?UMBRACO_MACRO macroAlias="x" /> -->preview</div>'
        )
        assert persisted_fromEditorMarkup(html) == html

    def test_plain_divs_untouched(self):
        """Divs without the holder class pass through"""
        html = '<div class="content"><p>text</p></div>'
        assert persisted_fromEditorMarkup(html) == html

    def test_custom_holder_class(self):
        """The pattern follows the configured holder class"""
        codec = EditorFormatCodec(AppSettings(holder_class="macro-box"))
        html = '<div class="macro-box"><!-- <?UMBRACO_MACRO macroAlias="x" /> --></div>'

        assert codec.persisted_make(html) == '<?UMBRACO_MACRO macroAlias="x" />'


class TestRoundTrip:
    """Persisted -> editor -> persisted recovers the tag"""

    @pytest.mark.parametrize("tag", [
        '<?UMBRACO_MACRO macroAlias="x"/>',
        '<?UMBRACO_MACRO macroAlias="weather" city="oslo" units="metric" />',
        "<?UMBRACO_MACRO macroAlias='News' count='5' />",
        '<?UMBRACO_MACRO macroAlias="multi"\n    a="1"\n/>',
    ])
    def test_round_trip(self, tag):
        """The tag text is preserved regardless of html attributes"""
        for attributes in ({}, {"data-load-content": "false", "id": "m"}):
            editor = editorMarkup_fromPersisted(tag, attributes)
            assert persisted_fromEditorMarkup(editor) == tag

    def test_round_trip_in_document(self):
        """Surrounding content survives the round trip"""
        source = (
            "<h1>Title</h1>\n"
            '<?UMBRACO_MACRO macroAlias="a" />\n'
            "<p>Body</p>\n"
            '<?UMBRACO_MACRO macroAlias="b" x="1" />\n'
        )

        editor = editorMarkup_fromPersisted(source, {"data-load-content": "false"})
        assert persisted_fromEditorMarkup(editor) == source
