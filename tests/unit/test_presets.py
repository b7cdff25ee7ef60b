"""Unit tests for document option presets."""

import pytest

from cvembed.contexts.document.presets import (
    apply_presets,
    load_document_presets,
    load_nested_presets,
)


@pytest.fixture
def presets_file(tmp_path):
    path = tmp_path / "presets.yaml"
    path.write_text(
        "\n".join(
            [
                "colors:",
                "  red:",
                "    accentColor: '#ff0000'",
                "spacing:",
                "  dense:",
                "    density: compact",
                "    fontSize: small",
                "broken:",
                "  order:",
                "    sectionOrder: [skills, bogus]",
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.mark.unit
class TestLoadPresets:
    """Test preset file loading."""

    def test_packaged_presets(self):
        nested = load_nested_presets()
        assert set(nested) == {"spacing", "colors", "typography"}

        flattened = load_document_presets()
        assert flattened["colors_ocean"] == {"accentColor": "#1D4ED8"}
        assert "spacing_tight" in flattened

    def test_flattening(self, presets_file):
        flattened = load_document_presets(presets_file)
        assert sorted(flattened) == ["broken_order", "colors_red", "spacing_dense"]


@pytest.mark.unit
class TestApplyPresets:
    """Test preset application."""

    def test_later_presets_override(self, empty_resume):
        updated = apply_presets(empty_resume, ["colors_ocean", "colors_claret"])
        assert updated["meta"]["documentOptions"]["accentColor"] == "#9F1239"

    def test_presets_compose(self, empty_resume, presets_file):
        updated = apply_presets(empty_resume, ["spacing_dense", "colors_red"], presets_file)
        options = updated["meta"]["documentOptions"]

        assert options["density"] == "compact"
        assert options["fontSize"] == "small"
        assert options["accentColor"] == "#ff0000"
        assert options["bulletStyle"] == "dot"

    def test_input_is_untouched(self, empty_resume):
        apply_presets(empty_resume, ["typography_modern"])
        assert empty_resume["meta"]["documentOptions"]["fontFamily"] == "satoshi"

    def test_result_is_normalized(self, empty_resume, presets_file):
        updated = apply_presets(empty_resume, ["broken_order"], presets_file)
        order = updated["meta"]["documentOptions"]["sectionOrder"]

        assert order[0] == "skills"
        assert "bogus" not in order
        assert len(order) == 10

    def test_unknown_preset(self, empty_resume):
        with pytest.raises(ValueError, match="Preset 'colors_neon' not found"):
            apply_presets(empty_resume, ["colors_neon"])
