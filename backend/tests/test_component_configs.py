import pytest

from schoolpages.domain.components import (
    CONFIG_MODELS,
    FileConfig,
    HeadingConfig,
    ListConfig,
    parse_config,
)
from schoolpages.domain.exceptions import InvalidComponentConfig, UnsupportedComponent


def test_parse_config_picks_the_variant_from_the_component_type():
    config = parse_config("heading", {"text": "Welcome", "level": 1, "alignment": "center"})

    assert isinstance(config, HeadingConfig)
    assert config.level == 1
    assert config.alignment == "center"


def test_common_fields_use_stored_camel_case_keys():
    config = parse_config(
        "paragraph",
        {"text": "Hi", "className": "intro", "customStyles": {"fontSize": "18px"}, "animation": "zoom"},
    )

    assert config.class_name == "intro"
    assert config.custom_styles == {"fontSize": "18px"}
    assert config.animation == "zoom"


def test_animation_defaults_to_fade():
    assert parse_config("quote", {"text": "x"}).animation == "fade"
    assert parse_config("quote", {"text": "x", "animation": "spin"}).animation == "fade"
    assert parse_config("quote", {"text": "x", "animation": "none"}).animation == "none"


@pytest.mark.parametrize("level", [0, 7, 9, -1, "big", None, True])
def test_out_of_range_heading_level_falls_back_to_two(level):
    assert parse_config("heading", {"text": "x", "level": level}).level == 2


def test_out_of_range_enums_fall_back_to_defaults():
    assert parse_config("heading", {"text": "x", "alignment": "diagonal"}).alignment == "left"
    assert parse_config("paragraph", {"text": "x", "alignment": "justify"}).alignment == "justify"
    assert parse_config("divider", {"variant": "wavy", "thickness": 0}).variant == "solid"
    assert parse_config("divider", {"thickness": 0}).thickness == 1
    assert parse_config("button", {"text": "Go", "variant": "huge"}).variant == "primary"
    assert parse_config("grid", {"columns": 40}).columns == 2


def test_missing_required_field_is_invalid():
    with pytest.raises(InvalidComponentConfig) as exc:
        parse_config("heading", {"level": 1})

    assert "text" in str(exc.value)
    assert exc.value.component_type == "heading"


def test_non_object_config_is_invalid():
    with pytest.raises(InvalidComponentConfig):
        parse_config("paragraph", ["not", "a", "dict"])


def test_unknown_component_type_is_unsupported():
    with pytest.raises(UnsupportedComponent):
        parse_config("carousel", {})


def test_list_accepts_legacy_ordered_flag_and_stringifies_items():
    config = parse_config("list", {"items": ["a", 2], "ordered": True})

    assert isinstance(config, ListConfig)
    assert config.list_type == "ordered"
    assert config.items == ["a", "2"]


def test_file_type_key_is_the_mime_type():
    config = parse_config("file", {"url": "/f.pdf", "name": "Syllabus", "type": "application/pdf", "size": 2048})

    assert isinstance(config, FileConfig)
    assert config.component == "file"
    assert config.mime_type == "application/pdf"
    assert config.size == "2048"


def test_card_accepts_nested_image_without_tag():
    config = parse_config("card", {"title": "T", "content": "Body", "image": {"src": "/a.png"}})

    assert config.image.src == "/a.png"
    assert config.image.alignment == "center"


def test_every_catalog_type_has_a_config_model():
    from schoolpages.domain.catalog import COMPONENT_TYPE_CATALOG

    assert {name for name, _, _ in COMPONENT_TYPE_CATALOG} == set(CONFIG_MODELS)
