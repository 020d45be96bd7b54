"""Tests for the vault render, resolve and index commands."""

from noteweave.api.vault.cmd_index import cmd_index
from noteweave.api.vault.cmd_render import cmd_render
from noteweave.api.vault.cmd_resolve import cmd_resolve
from tests.conftest import run_cmd, write_notes


class TestCmdRender:
    def test_render_vault_relative(self, noteweave_home, vault_dir):
        write_notes(vault_dir, {"A.md": "# A\n\n![[B]]", "B.md": "bee"})
        result = run_cmd(cmd_render, "A.md")
        assert result.success, result.output["errors"]
        assert "<h1>A</h1>" in result.output["html"]
        assert "bee" in result.output["html"]
        size = len(result.output["html"].encode())
        assert result.output["cache"] == {"count": 1, "size_bytes": size, "hits": 0, "misses": 1}
        assert result.result == "Rendered A.md"

    def test_render_absolute(self, noteweave_home, vault_dir):
        write_notes(vault_dir, {"A.md": "a"})
        result = run_cmd(cmd_render, str(vault_dir / "A.md"))
        assert result.success
        assert result.output["path"] == str(vault_dir / "A.md")

    def test_render_writes_output_file(self, noteweave_home, vault_dir, tmp_path):
        write_notes(vault_dir, {"A.md": "a"})
        out = tmp_path / "out.html"
        result = run_cmd(cmd_render, "A.md", output_path=str(out))
        assert result.success
        assert out.read_text(encoding="utf-8") == result.output["html"]

    def test_render_missing_note(self, noteweave_home, vault_dir):
        result = run_cmd(cmd_render, "missing.md")
        assert not result.success
        assert result.output["errors"][0].startswith("Note not found")
        assert result.output["html"] == ""

    def test_render_missing_vault(self, noteweave_home, vault_dir):
        vault_dir.rmdir()
        result = run_cmd(cmd_render, "A.md")
        assert not result.success
        assert "Cannot index vault" in result.output["errors"][0]

    def test_render_without_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NOTEWEAVE_HOME", str(tmp_path))
        result = run_cmd(cmd_render, "A.md")
        assert not result.success
        assert result.output["errors"][0].startswith("Failed to load config")


class TestCmdResolve:
    def test_resolved(self, noteweave_home, vault_dir):
        write_notes(vault_dir, {"Folder/Note.md": ""})
        result = run_cmd(cmd_resolve, "Note#Intro|Shown")
        assert result.success
        out = result.output
        assert out["status"] == "resolved"
        assert out["target"] == "Note"
        assert out["subtarget"] == "#Intro"
        assert out["alias"] == "Shown"
        assert out["resolved_path"] == str((vault_dir / "Folder" / "Note.md").resolve())
        assert result.result == "[[Note#Intro|Shown]] is resolved"

    def test_not_found(self, noteweave_home):
        result = run_cmd(cmd_resolve, "Nowhere")
        assert result.success
        assert result.output["status"] == "not_found"
        assert result.output["resolved_path"] is None
        assert result.result == "[[Nowhere]] is not found"

    def test_config_error(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NOTEWEAVE_HOME", str(tmp_path))
        result = run_cmd(cmd_resolve, "Note")
        assert not result.success
        assert result.output["status"] == "error"


class TestCmdIndex:
    def test_counts_and_ambiguity(self, noteweave_home, vault_dir):
        write_notes(vault_dir, {"a/Note.md": "", "b/Note.md": "", "Other.md": "", ".hidden/x.md": ""})
        result = run_cmd(cmd_index)
        assert result.success
        assert result.output["note_count"] == 3
        assert list(result.output["ambiguous"]) == ["Note"]
        assert len(result.output["warnings"]) == 1
        assert result.result == "Indexed 3 note(s)"

    def test_missing_vault(self, noteweave_home, vault_dir):
        vault_dir.rmdir()
        result = run_cmd(cmd_index)
        assert not result.success
        assert result.output["note_count"] == 0
