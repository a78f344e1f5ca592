"""
Tests for the ASCII design registry.
"""

import pytest

from fetchpac.exceptions import TemplateError
from fetchpac.models import Template
from fetchpac.ui.ascii import (
    DEFAULT_REGISTRY, AsciiRegistry, build_template,
    substitute_tokens, visible_width,
)


class TestBuiltinTemplates:
    """The built-in designs must match their declared size exactly."""

    @pytest.mark.parametrize("design", ["Arch", "Manjaro", "Tux"])
    def test_declared_size_matches_body(self, design):
        template = DEFAULT_REGISTRY.select(design)
        lines = template.body.split("\n")

        assert template.height == 21
        assert template.width == 50
        assert len(lines) == template.height
        assert all(visible_width(line) == template.width for line in lines)

    @pytest.mark.parametrize("design", ["Arch", "Manjaro", "Tux"])
    def test_bodies_use_color_tokens(self, design):
        body = DEFAULT_REGISTRY.select(design).body

        assert "${a1}" in body
        assert "${a2}" in body or "${a3}" in body


class TestSelection:
    """Test design name to template selection."""

    @pytest.mark.parametrize("design,expected", [
        ("Arch", "Arch"),
        ("arch", "Arch"),
        ("Manjaro", "Manjaro"),
        ("MANJARO", "Manjaro"),
        ("DarkManjaro", "Manjaro"),
        ("Manjaro Linux", "Manjaro"),
        ("Tux", "Tux"),
        ("darkTux", "Tux"),
        ("DarkArch", "Arch"),
        ("EndeavourOS", "Arch"),
        ("", "Arch"),
    ])
    def test_select(self, design, expected):
        assert DEFAULT_REGISTRY.select(design).name == expected

    @pytest.mark.parametrize("design", ["Arch", "DarkTux", "Manjaro", "whatever"])
    def test_selection_is_idempotent(self, design):
        assert DEFAULT_REGISTRY.select(design) is DEFAULT_REGISTRY.select(design)

    def test_custom_registry(self):
        default = Template(name="Plain", height=1, width=3, body="abc")
        other = Template(name="Box", height=1, width=3, body="[ ]")
        registry = AsciiRegistry(default)
        registry.register(other)

        assert registry.select("my box") is other
        assert registry.select("none") is default
        assert registry.names() == ["Plain", "Box"]


class TestTokens:
    """Test the fixed-vocabulary token substitution."""

    def test_substitute_known_tokens(self):
        text = "${a1}x${a2}y${a3}z${rs}"
        values = {"a1": "<1>", "a2": "<2>", "a3": "<3>", "rs": "<r>"}

        assert substitute_tokens(text, values) == "<1>x<2>y<3>z<r>"

    def test_unknown_tokens_untouched(self):
        assert substitute_tokens("${HOME} ${c1} $a1", {"a1": "X"}) == "${HOME} ${c1} $a1"

    def test_visible_width_ignores_tokens(self):
        assert visible_width("${a1}ab${rs}c") == 3


class TestBuildTemplate:
    """Test template construction and validation."""

    def test_lines_are_padded_to_width(self):
        template = build_template("T", "\n${a1}ab\nabcd", 2, 6)

        assert template.body.split("\n") == ["${a1}ab    ", "abcd  "]

    def test_wrong_height(self):
        with pytest.raises(TemplateError):
            build_template("T", "\na\nb\nc", 2, 5)

    def test_too_wide(self):
        with pytest.raises(TemplateError):
            build_template("T", "\nabcdef", 1, 5)
