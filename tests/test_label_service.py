"""Tests for labels derived from raw identifiers."""

import pytest

from core.services.label_service import (
    build_breadcrumb,
    category_button_text,
    category_title,
    display_filename,
    group_context_label,
    group_heading,
    sub_block_heading,
)


class TestCategoryTitle:
    def test_strips_numeric_prefix(self):
        assert category_title("1.1次会・2次会", "1") == "1次会・2次会"

    def test_without_dot_unchanged(self):
        assert category_title("忘年会", "c0") == "忘年会"

    def test_falls_back_to_key(self):
        assert category_title("", "3.二次会") == "二次会"
        assert category_title(None, "c9") == "c9"

    def test_both_missing(self):
        assert category_title(None, None) == ""

    def test_only_first_dot_is_split(self):
        assert category_title("1.a.b", "k") == "a.b"


class TestGroupLabels:
    def test_heading(self):
        assert group_heading("1.9.集合写真") == "【集合写真】"

    def test_heading_keeps_dots_in_label(self):
        assert group_heading("1.9.Vol.2") == "【Vol.2】"

    @pytest.mark.parametrize("name", ["misc", "1.9", ""])
    def test_heading_short_names_wrap_whole(self, name):
        assert group_heading(name) == f"【{name}】"

    def test_context_label(self):
        assert group_context_label("1.5.全体歓談") == "全体歓談"
        assert group_context_label("1.5") == "1.5"
        assert group_context_label(None) == ""


class TestDisplayFilename:
    def test_after_first_underscore(self):
        assert display_filename("1.2.X_009.jpg") == "009.jpg"
        assert display_filename("a_b_c.jpg") == "b_c.jpg"

    def test_no_underscore(self):
        assert display_filename("snapshot.jpg") == "snapshot.jpg"
        assert display_filename(None) == ""


class TestBreadcrumb:
    def test_suppresses_no_sub_folder_id(self):
        assert build_breadcrumb("忘年会", "全体歓談", "X") == "忘年会 / 全体歓談"

    def test_includes_real_sub_id(self):
        assert build_breadcrumb("忘年会", "全体歓談", "1") == "忘年会 / 全体歓談 / 1"

    def test_skips_empty_parts(self):
        assert build_breadcrumb("", "全体歓談", None) == "全体歓談"
        assert build_breadcrumb("忘年会", "", "") == "忘年会"
        assert build_breadcrumb("", "", None) == ""

    def test_lowercase_x_is_a_real_sub_id(self):
        assert build_breadcrumb("a", "b", "x") == "a / b / x"


class TestHostLabels:
    def test_sub_block_heading(self):
        assert sub_block_heading("1-1") == "■ 1-1"

    def test_category_button_text(self):
        assert category_button_text("忘年会", 12) == "忘年会（12枚）"
        assert category_button_text("忘年会", 0) == "忘年会"
