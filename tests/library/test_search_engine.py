"""Unit tests for SearchEngine."""

import os
from pathlib import Path

import pytest

from filebridge_library.fs import AccessDeniedError
from filebridge_library.fs import InvalidArgumentError
from filebridge_library.fs import NotDirectoryError
from filebridge_library.fs import NotFoundError
from filebridge_library.fs import PathGuard
from filebridge_library.fs import SearchEngine
from filebridge_library.models import EntryKind


@pytest.fixture
def tree(test_root: Path) -> Path:
    """A small project to search:

    src/app.js          - mentions TODO twice
    src/util.py         - mentions todo once (lower case)
    src/todo/           - directory whose name matches
    src/todo/list.md    - no match in content
    .git/config         - hidden, never searched
    logo.png            - binary, but mentions TODO after its NUL
    """
    (test_root / "src" / "todo").mkdir(parents=True)
    (test_root / "src" / "app.js").write_text("const a = 1;\n  // TODO: fix\nconst b = 2; // TODO later\n")
    (test_root / "src" / "util.py").write_text("def f():\n    pass  # todo\n")
    (test_root / "src" / "todo" / "list.md").write_text("- milk\n- eggs\n")
    (test_root / ".git").mkdir()
    (test_root / ".git" / "config").write_text("TODO hidden\n")
    (test_root / "logo.png").write_bytes(b"\x89PNG\x00\xff\xfeTODO")
    return test_root


@pytest.fixture
def engine(test_root: Path) -> SearchEngine:
    return SearchEngine(PathGuard(test_root))


@pytest.mark.unit
class TestSearch:
    """Test name and content matching."""

    @pytest.mark.anyio
    async def test_case_insensitive_default(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("todo")

        assert results.query == "todo"
        assert results.search_path == ""
        paths = [hit.relative_path for hit in results.results]
        # Sorted pre-order; hidden entries skipped
        assert paths == ["logo.png", "src/app.js", "src/todo", "src/util.py"]
        assert results.total_results == 4

    @pytest.mark.anyio
    async def test_content_matches(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("TODO")
        app = next(hit for hit in results.results if hit.name == "app.js")

        assert app.kind == EntryKind.FILE
        assert app.language_tag == "javascript"
        assert app.filename_matched is False
        assert [(m.line_number, m.line_text, m.matched_substring) for m in app.content_matches] == [
            (2, "// TODO: fix", "TODO"),
            (3, "const b = 2; // TODO later", "TODO"),
        ]

    @pytest.mark.anyio
    async def test_directory_hit_has_no_content(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("^todo$")
        (hit,) = results.results

        assert hit.kind == EntryKind.DIRECTORY
        assert hit.relative_path == "src/todo"
        assert hit.filename_matched is True
        assert hit.content_matches is None
        assert hit.language_tag is None

    @pytest.mark.anyio
    async def test_filename_match(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search(r"list\.md")
        (hit,) = results.results

        assert hit.relative_path == "src/todo/list.md"
        assert hit.filename_matched is True
        assert hit.content_matches == []

    @pytest.mark.anyio
    async def test_case_sensitive(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("TODO", case_sensitive=True)

        assert [hit.relative_path for hit in results.results] == ["logo.png", "src/app.js"]

    @pytest.mark.anyio
    async def test_file_type_filter(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("todo", file_types=["python"])

        # Directories are not filtered by type
        assert [hit.relative_path for hit in results.results] == ["src/todo", "src/util.py"]

    @pytest.mark.anyio
    async def test_search_subdirectory(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("milk", search_path="src/todo")

        assert results.search_path == "src/todo"
        assert [hit.relative_path for hit in results.results] == ["src/todo/list.md"]

    @pytest.mark.anyio
    async def test_regex_query(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search(r"const \w = \d")
        (hit,) = results.results

        assert [m.matched_substring for m in hit.content_matches] == ["const a = 1", "const b = 2"]

    @pytest.mark.anyio
    async def test_no_results(self, engine: SearchEngine, tree: Path) -> None:
        results = await engine.search("zzz-not-there")

        assert results.results == []
        assert results.total_results == 0

    @pytest.mark.anyio
    async def test_non_utf8_file_still_searched(self, engine: SearchEngine, test_root: Path) -> None:
        (test_root / "notes.txt").write_bytes("caf\u00e9\nworld\n".encode("latin-1"))

        (hit,) = (await engine.search("world")).results

        assert hit.name == "notes.txt"
        assert [(m.line_number, m.line_text) for m in hit.content_matches] == [(2, "world")]

    @pytest.mark.anyio
    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires named pipes")
    async def test_fifo_matched_by_name_only(self, engine: SearchEngine, test_root: Path) -> None:
        os.mkfifo(test_root / "needle.pipe")
        (test_root / "ok.txt").write_text("needle\n")

        results = await engine.search("needle")

        pipe = next(hit for hit in results.results if hit.name == "needle.pipe")
        assert pipe.filename_matched is True
        assert pipe.content_matches == []
        assert results.total_results == 2


@pytest.mark.unit
class TestSearchLimits:
    """Test result, match and size caps."""

    @pytest.mark.anyio
    async def test_result_cap_keeps_total(self, test_root: Path) -> None:
        for i in range(5):
            (test_root / f"match{i}.txt").write_text("needle\n")
        engine = SearchEngine(PathGuard(test_root), max_results=2)

        results = await engine.search("needle")

        assert results.total_results == 5
        assert [hit.name for hit in results.results] == ["match0.txt", "match1.txt"]

    @pytest.mark.anyio
    async def test_matches_per_file_cap(self, test_root: Path) -> None:
        (test_root / "many.txt").write_text("needle\n" * 50)
        engine = SearchEngine(PathGuard(test_root), max_matches_per_file=10)

        (hit,) = (await engine.search("needle")).results

        assert len(hit.content_matches) == 10
        assert hit.content_matches[-1].line_number == 10

    @pytest.mark.anyio
    async def test_large_file_matched_by_name_only(self, test_root: Path) -> None:
        (test_root / "needle.log").write_text("needle " * 100)
        (test_root / "big.log").write_text("needle " * 100)
        engine = SearchEngine(PathGuard(test_root), max_file_bytes=64)

        results = await engine.search("needle")

        (hit,) = results.results
        assert hit.name == "needle.log"
        assert hit.filename_matched is True
        assert hit.content_matches == []


@pytest.mark.unit
class TestSearchErrors:
    """Test rejected searches."""

    @pytest.mark.anyio
    async def test_empty_query(self, engine: SearchEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            await engine.search("")

    @pytest.mark.anyio
    async def test_invalid_pattern(self, engine: SearchEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            await engine.search("([unclosed")

    @pytest.mark.anyio
    async def test_missing_start(self, engine: SearchEngine) -> None:
        with pytest.raises(NotFoundError):
            await engine.search("x", search_path="ghost")

    @pytest.mark.anyio
    async def test_file_start(self, engine: SearchEngine, tree: Path) -> None:
        with pytest.raises(NotDirectoryError):
            await engine.search("x", search_path="src/app.js")

    @pytest.mark.anyio
    async def test_traversal_denied(self, engine: SearchEngine) -> None:
        with pytest.raises(AccessDeniedError):
            await engine.search("x", search_path="../")

    @pytest.mark.anyio
    async def test_symlink_out_of_root_skipped(self, test_root: Path, tmp_path: Path) -> None:
        secret = tmp_path / "secret.txt"
        secret.write_text("needle in the secret\n")
        (test_root / "leak.txt").symlink_to(secret)
        (test_root / "ok.txt").write_text("needle\n")
        engine = SearchEngine(PathGuard(test_root))

        results = await engine.search("needle")

        assert [hit.name for hit in results.results] == ["ok.txt"]
