"""
Attribute extraction tests
"""

from macrotags.lib.attributes import (
    AttributeExtractor,
    RegexAttributeExtractor,
    attributes_extract,
)


class TestRegexAttributeExtractor:
    """Permissive name="value" extraction"""

    def test_persisted_tag(self):
        """Keys lower-cased, values verbatim, source order kept"""
        attributes = attributes_extract(
            '<?UMBRACO_MACRO macroAlias="Weather" City="Oslo" units="metric" />'
        )

        assert attributes == {"macroalias": "Weather", "city": "Oslo", "units": "metric"}
        assert list(attributes) == ["macroalias", "city", "units"]

    def test_single_quotes(self):
        """Single-quoted values are accepted"""
        assert attributes_extract("<umbraco:macro alias='a' />") == {"alias": "a"}

    def test_quotes_inside_other_quotes(self):
        """A value may contain the other quote character"""
        attributes = attributes_extract("""<?UMBRACO_MACRO macroAlias="x" title='say "hi"' />""")
        assert attributes["title"] == 'say "hi"'

    def test_whitespace_around_equals(self):
        """Spaces around '=' are tolerated"""
        assert attributes_extract('<?UMBRACO_MACRO macroAlias = "x" />') == {"macroalias": "x"}

    def test_empty_value(self):
        """Empty values are kept"""
        assert attributes_extract('<?UMBRACO_MACRO macroAlias="" />') == {"macroalias": ""}

    def test_duplicate_key_first_wins(self):
        """The first of duplicated keys is kept"""
        attributes = attributes_extract('<?UMBRACO_MACRO alias="one" ALIAS="two" />')
        assert attributes == {"alias": "one"}

    def test_tag_name_not_an_attribute(self):
        """Tags without attributes give an empty mapping"""
        assert attributes_extract("<?UMBRACO_MACRO />") == {}
        assert attributes_extract("<umbraco:macro>") == {}

    def test_unquoted_values_ignored(self):
        """Only quoted values are recognized"""
        assert attributes_extract('<umbraco:macro alias=x other="y"/>') == {"other": "y"}

    def test_multiline_tag(self):
        """Attributes spread over lines"""
        attributes = attributes_extract('<?UMBRACO_MACRO\n  macroAlias="x"\n  a="1"\n/>')
        assert attributes == {"macroalias": "x", "a": "1"}

    def test_satisfies_protocol(self):
        """The regex extractor is an AttributeExtractor"""
        assert isinstance(RegexAttributeExtractor(), AttributeExtractor)
