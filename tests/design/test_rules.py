"""
Unit tests for the design checklist.
"""

from dataclasses import replace

import pytest

from postfit.design import (
    CHECK_IDS,
    CheckSeverity,
    PostVariation,
    check_typography_hierarchy,
    checklist_score,
    validate_design_checklist,
)


def _item(items, check_id):
    return next(i for i in items if i.id == check_id)


class TestChecklistShape:

    def test_validate_when_any_input_then_five_items_in_fixed_order(self, sample_variation):
        items = validate_design_checklist(sample_variation, "1:1")
        assert tuple(i.id for i in items) == CHECK_IDS

    def test_validate_when_colours_invalid_then_still_five_items(self, sample_variation):
        variation = replace(sample_variation, text_color="oops", layout="diagonal")
        items = validate_design_checklist(variation, "9:16")
        assert sorted(i.id for i in items) == sorted(CHECK_IDS)

    def test_validate_when_dict_payload_then_parsed(self):
        items = validate_design_checklist(
            {
                "headline": "Go",
                "body": "",
                "textColor": "#FFFFFF",
                "backgroundColor": "#000000",
                "layout": "split",
                "headlineFontSize": 2,
                "bodyFontSize": 1,
            },
            "5:6",
        )
        assert _item(items, "alignment").severity is CheckSeverity.WARN
        assert _item(items, "typography").severity is CheckSeverity.OK


class TestContrastCheck:
    """Tests for the contrast rule."""

    def test_contrast_when_white_on_black_then_ok_with_value(self, sample_variation):
        item = _item(validate_design_checklist(sample_variation, "1:1"), "contrast")
        assert item.severity is CheckSeverity.OK
        assert item.value == "21.0:1"

    def test_contrast_when_just_below_aa_then_warn(self, sample_variation):
        variation = replace(sample_variation, text_color="#777777", background_color="#FFFFFF")
        item = _item(validate_design_checklist(variation, "1:1"), "contrast")
        assert item.severity is CheckSeverity.WARN
        assert item.value == "4.5:1"

    def test_contrast_when_below_three_then_error(self, sample_variation):
        variation = replace(sample_variation, text_color="#AAAAAA", background_color="#FFFFFF")
        item = _item(validate_design_checklist(variation, "1:1"), "contrast")
        assert item.severity is CheckSeverity.ERROR

    def test_contrast_when_colour_malformed_then_warn_without_value(self, sample_variation):
        variation = replace(sample_variation, background_color="#000")
        item = _item(validate_design_checklist(variation, "1:1"), "contrast")
        assert item.severity is CheckSeverity.WARN
        assert item.value is None
        assert "Cannot compute" in item.description


class TestHierarchyCheck:

    def test_hierarchy_when_centered_on_portrait_then_warn_naming_ratios(self, sample_variation):
        item = _item(validate_design_checklist(sample_variation, "5:6"), "hierarchy")
        assert item.severity is CheckSeverity.WARN
        assert "1:1, 9:16" in item.description

    def test_hierarchy_when_left_aligned_on_story_then_ok(self, sample_variation):
        variation = replace(sample_variation, layout="left-aligned")
        item = _item(validate_design_checklist(variation, "9:16"), "hierarchy")
        assert item.severity is CheckSeverity.OK

    def test_hierarchy_when_unknown_layout_then_ok(self, sample_variation):
        variation = replace(sample_variation, layout="diagonal")
        item = _item(validate_design_checklist(variation, "5:6"), "hierarchy")
        assert item.severity is CheckSeverity.OK


class TestTypographyCheck:

    def test_typography_when_multipliers_unset_then_warn(self, sample_variation):
        variation = replace(sample_variation, headline_font_size=None, body_font_size=None)
        item = _item(validate_design_checklist(variation, "1:1"), "typography")
        assert item.severity is CheckSeverity.WARN

    @pytest.mark.parametrize("headline,body,expected", [(1.2, 1.0, True), (1.1, 1.0, False), (1.0, 0.0, True)])
    def test_hierarchy_rule_when_ratio_varies_then_expected(self, headline, body, expected):
        assert check_typography_hierarchy(headline, body) is expected


class TestAlignmentCheck:

    def test_alignment_when_split_with_two_char_headline_then_warn(self, sample_variation):
        variation = replace(sample_variation, layout="split", headline="Go")
        item = _item(validate_design_checklist(variation, "1:1"), "alignment")
        assert item.severity is CheckSeverity.WARN

    def test_alignment_when_split_with_ten_char_headline_then_ok(self, sample_variation):
        variation = replace(sample_variation, layout="split", headline="x" * 10)
        item = _item(validate_design_checklist(variation, "1:1"), "alignment")
        assert item.severity is CheckSeverity.OK

    def test_alignment_when_short_headline_not_split_then_ok(self, sample_variation):
        variation = replace(sample_variation, headline="Go")
        item = _item(validate_design_checklist(variation, "1:1"), "alignment")
        assert item.severity is CheckSeverity.OK


class TestWhitespaceCheck:

    def test_whitespace_when_body_91_chars_then_warn(self, sample_variation):
        variation = replace(sample_variation, body="b" * 91)
        item = _item(validate_design_checklist(variation, "1:1"), "whitespace")
        assert item.severity is CheckSeverity.WARN
        assert "91" in item.description

    def test_whitespace_when_body_90_chars_then_ok(self, sample_variation):
        variation = replace(sample_variation, body="b" * 90)
        item = _item(validate_design_checklist(variation, "1:1"), "whitespace")
        assert item.severity is CheckSeverity.OK


class TestChecklistScore:

    def test_score_when_all_pass_then_one(self, sample_variation):
        items = validate_design_checklist(sample_variation, "1:1")
        assert checklist_score(items) == 1.0

    def test_score_when_empty_then_zero(self):
        assert checklist_score([]) == 0.0

    def test_to_dict_when_no_value_then_key_omitted(self, sample_variation):
        item = _item(validate_design_checklist(sample_variation, "1:1"), "alignment")
        assert "value" not in item.to_dict()
        assert item.to_dict()["severity"] == "ok"
