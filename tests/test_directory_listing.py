"""Tests for directory listing pages."""

from pathlib import Path

from tldserve.services.directory_listing import list_directory, natural_key, sorted_entries


class TestNaturalKey:
    def test_numbers_sort_numerically(self) -> None:
        names = ["file10", "File2", "file1"]
        assert sorted(names, key=natural_key) == ["file1", "File2", "file10"]


class TestSortedEntries:
    def test_directories_first_hidden_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "b.txt").write_text("")
        (tmp_path / "a.txt").write_text("")
        (tmp_path / "zeta").mkdir()
        (tmp_path / ".git").mkdir()
        names = [p.name for p in sorted_entries(tmp_path)]
        assert names == ["zeta", "a.txt", "b.txt"]


class TestListDirectory:
    def test_root_listing(self, tmp_path: Path) -> None:
        (tmp_path / "docs").mkdir()
        (tmp_path / "readme.md").write_text("")
        html = list_directory(str(tmp_path), "/")
        assert html == (
            "<h1>Index of /</h1><hr>"
            "<a href='/docs'>/docs</a><br>\n"
            "<a href='/readme.md'>/readme.md</a>"
        )

    def test_nested_listing(self, tmp_path: Path) -> None:
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "intro.txt").write_text("")
        html = list_directory(str(tmp_path), "/docs")
        assert html == "<h1>Index of /docs</h1><hr><a href='/docs/intro.txt'>/docs/intro.txt/</a>"

    def test_names_are_escaped(self, tmp_path: Path) -> None:
        (tmp_path / "<b>.txt").write_text("")
        html = list_directory(str(tmp_path), "/")
        assert "<b>" not in html.split("<hr>", 1)[1]
        assert "&lt;b&gt;.txt" in html

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert list_directory(str(tmp_path), "/nope") is None
