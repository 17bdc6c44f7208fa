"""Tests for the codegen module."""

from countries_generator.codegen import generate, render
from countries_generator.context_builder import build_context


def _context(country):
    return build_context({
        1: (country("CA", 1, 0, ["204", "226"]), country("US", 1, 1)),
        49: (country("DE", 49, 0),),
        358: (country("AX", 358, 0, ["18"]),),
    })


class TestRender:
    """Test the rendered Java source."""

    def test_header(self, country):
        output = render(_context(country))
        assert "package com.github.ialokim.phonefield;" in output
        assert "public final class Countries {" in output
        assert "public static final Map<Integer,List<Country>> COUNTRIES = new HashMap<>();" in output
        for imp in ("Arrays", "Collections", "HashMap", "List", "Map"):
            assert f"import java.util.{imp};" in output

    def test_single_group_uses_singleton_list(self, country):
        output = render(_context(country))
        assert (
            '        COUNTRIES.put(49, Collections.singletonList(new Country("DE", 49, false)));'
            in output.splitlines()
        )

    def test_multi_group_uses_arrays_as_list(self, country):
        lines = render(_context(country)).splitlines()
        start = lines.index("        COUNTRIES.put(1, Arrays.asList(")
        assert lines[start + 1:start + 6] == [
            '            new Country("CA", 1, false, Arrays.asList(',
            '                "204",',
            '                "226"',
            "            )),",
            '            new Country("US", 1, true)',
        ]
        assert lines[start + 6] == "        ));"

    def test_single_area_code(self, country):
        output = render(_context(country))
        assert 'new Country("AX", 358, false, Collections.singletonList("18"))' in output

    def test_group_order(self, country):
        output = render(_context(country))
        assert output.index("COUNTRIES.put(1,") < output.index("COUNTRIES.put(49,") < output.index("COUNTRIES.put(358,")

    def test_trailing_newline(self, country):
        assert render(_context(country)).endswith("}\n")


class TestGenerate:
    """Test writing the generated file."""

    def test_writes_file(self, country, tmp_path, capsys):
        path = generate(_context(country), output_dir=tmp_path / "out")
        assert path == tmp_path / "out" / "Countries.java"
        assert path.read_text() == render(_context(country))
        assert "4 countries, 3 dial codes" in capsys.readouterr().out
