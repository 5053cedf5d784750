"""
Unit tests for pdf_ua_generator/models.py.
"""

import pytest
from pydantic import ValidationError

from pdf_ua_generator.logging_helper import ConfigurationError
from pdf_ua_generator.models import (
    DEFAULT_CONFIG,
    BlockType,
    ContentBlock,
    DocumentConfig,
    Margins,
    coerce_blocks,
)


class TestBlockType:

    def test_known_values(self):
        assert BlockType("ul") is BlockType.UNORDERED_LIST
        assert BlockType("table") is BlockType.TABLE

    def test_unknown_value_resolves_to_other(self):
        assert BlockType("weird") is BlockType.OTHER

    def test_case_insensitive(self):
        assert BlockType("H3") is BlockType.H3


class TestContentBlock:

    def test_defaults(self):
        block = ContentBlock()

        assert block.type is BlockType.PARAGRAPH
        assert block.content == ""
        assert block.items == []
        assert block.headers is None
        assert block.rows is None
        assert block.attributes == {}

    def test_heading_level(self):
        assert ContentBlock(type="h2").heading_level == 2
        assert ContentBlock(type="p").heading_level is None

    def test_none_values_fall_back_to_defaults(self):
        block = ContentBlock.from_dict(
            {"type": None, "content": None, "items": None, "attributes": None}
        )

        assert block.type is BlockType.PARAGRAPH
        assert block.content == ""
        assert block.items == []
        assert block.attributes == {}

    def test_immutable(self):
        block = ContentBlock(content="x")

        with pytest.raises(ValidationError):
            block.content = "y"

    def test_coerce_blocks_keeps_order_and_instances(self):
        existing = ContentBlock(type="h1", content="a")
        blocks = coerce_blocks([existing, {"type": "p", "content": "b"}])

        assert blocks[0] is existing
        assert blocks[1].content == "b"


class TestDocumentConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.title == "PDF/UA Document"
        assert DEFAULT_CONFIG.language == "en-US"
        assert DEFAULT_CONFIG.pdf_version == "1.7"
        assert DEFAULT_CONFIG.orientation == "P"
        assert DEFAULT_CONFIG.unit == "mm"
        assert DEFAULT_CONFIG.format == "A4"
        assert DEFAULT_CONFIG.margins == Margins(left=15, top=15, right=15, bottom=15)

    def test_merge_changes_only_given_keys(self):
        merged = DEFAULT_CONFIG.merged({"title": "T"})

        assert merged.title == "T"
        assert merged.model_dump(exclude={"title"}) == DEFAULT_CONFIG.model_dump(
            exclude={"title"}
        )

    def test_merge_returns_new_instance(self):
        merged = DEFAULT_CONFIG.merged({"author": "A"})

        assert merged is not DEFAULT_CONFIG
        assert DEFAULT_CONFIG.author == "PDF/UA Generator"

    def test_merge_with_nothing(self):
        assert DEFAULT_CONFIG.merged(None) == DEFAULT_CONFIG

    def test_margins_are_replaced_as_a_whole(self):
        merged = DEFAULT_CONFIG.merged({"margins": {"left": 20}})

        assert merged.margins.left == 20
        assert merged.margins.top == 15

    def test_unknown_key_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DEFAULT_CONFIG.merged({"titel": "typo"})

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_direction_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            DEFAULT_CONFIG.merged({"text_direction": "up"})

    @pytest.mark.parametrize("version", ["1.0", "1.4", "1.7", "2.0"])
    def test_accepted_pdf_versions(self, version):
        assert DEFAULT_CONFIG.merged({"pdf_version": version}).pdf_version == version

    def test_numeric_pdf_version_from_yaml(self):
        assert DEFAULT_CONFIG.merged({"pdf_version": 1.5}).pdf_version == "1.5"

    @pytest.mark.parametrize("version", ["banana", "1.8", "3.0", "1", ""])
    def test_invalid_pdf_version_is_a_configuration_error(self, version):
        with pytest.raises(ConfigurationError):
            DEFAULT_CONFIG.merged({"pdf_version": version})

    def test_frozen(self):
        config = DocumentConfig()

        with pytest.raises(ValidationError):
            config.title = "changed"
