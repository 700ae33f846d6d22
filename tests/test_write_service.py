"""End-to-end tests for the write workflow with a scripted editor."""

from __future__ import annotations

from pathlib import Path

import pytest
from garden.errors import CommitError, LaunchError, PromptError
from garden.services import write as write_module
from garden.services.write import write_note


def appending_editor(text: str):
    def fake_editor(path: Path, editor: str | None = None) -> None:
        with path.open("a", encoding="utf-8") as fh:
            fh.write(text)

    return fake_editor


def replacing_editor(text: str):
    def fake_editor(path: Path, editor: str | None = None) -> None:
        path.write_text(text, encoding="utf-8")

    return fake_editor


def untouched_editor(path: Path, editor: str | None = None) -> None:
    return None


def answers(*values: str):
    script = list(values)

    def prompt(text: str) -> str:
        return script.pop(0)

    return prompt


def test_inferred_title_is_confirmed_and_committed(tmp_path: Path) -> None:
    dest = write_note(
        tmp_path,
        launch_fn=appending_editor("\n# My Note\nhello"),
        prompt_fn=answers("N"),
    )

    assert dest == tmp_path / "my-note.md"
    assert dest.read_text(encoding="utf-8") == "# \n# My Note\nhello"
    assert list(tmp_path.iterdir()) == [dest]


def test_explicit_title_twice_disambiguates(tmp_path: Path) -> None:
    def no_prompt(text: str) -> str:
        raise AssertionError("explicit titles must not prompt")

    first = write_note(
        tmp_path, "Draft One", launch_fn=untouched_editor, prompt_fn=no_prompt
    )
    second = write_note(
        tmp_path, "Draft One", launch_fn=untouched_editor, prompt_fn=no_prompt
    )

    assert first.name == "draft-one.md"
    assert second.name == "draft-one1.md"
    assert first.read_text(encoding="utf-8") == "# "
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "draft-one.md",
        "draft-one1.md",
    ]


def test_missing_heading_prompts_for_filename(tmp_path: Path) -> None:
    dest = write_note(
        tmp_path,
        launch_fn=appending_editor("\njust some text"),
        prompt_fn=answers("Loose Thoughts"),
    )

    assert dest.name == "loose-thoughts.md"


def test_user_can_replace_inferred_title(tmp_path: Path) -> None:
    dest = write_note(
        tmp_path,
        launch_fn=appending_editor("Heading\n# Inferred"),
        prompt_fn=answers("y", "Chosen Name"),
    )

    assert dest.name == "chosen-name.md"


def test_editor_is_given_configured_command(tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def recording_editor(path: Path, editor: str | None = None) -> None:
        seen["path"] = path
        seen["editor"] = editor
        path.write_text("# Seen", encoding="utf-8")

    dest = write_note(
        tmp_path, launch_fn=recording_editor, editor="nvim", interactive=False
    )

    assert seen["editor"] == "nvim"
    assert Path(seen["path"]).parent == tmp_path
    assert dest.name == "seen.md"


def test_editor_failure_keeps_scratch(tmp_path: Path) -> None:
    def failing_editor(path: Path, editor: str | None = None) -> None:
        path.write_text("# half written", encoding="utf-8")
        raise LaunchError("editor crashed", scratch_path=path)

    with pytest.raises(LaunchError) as excinfo:
        write_note(tmp_path, launch_fn=failing_editor)

    scratch = excinfo.value.scratch_path
    assert scratch is not None and scratch.exists()
    assert list(tmp_path.iterdir()) == [scratch]


def test_prompt_failure_reports_scratch_path(tmp_path: Path) -> None:
    with pytest.raises(PromptError) as excinfo:
        write_note(
            tmp_path,
            launch_fn=replacing_editor("body only"),
            interactive=False,
        )

    scratch = excinfo.value.scratch_path
    assert scratch is not None
    assert str(scratch) in str(excinfo.value)
    assert scratch.read_text(encoding="utf-8") == "body only"


def test_commit_failure_keeps_scratch_content(tmp_path: Path, monkeypatch) -> None:
    def failing_commit(scratch: Path, garden_dir: Path, base_name: str) -> Path:
        raise CommitError("disk full", scratch_path=scratch)

    monkeypatch.setattr(write_module, "commit_scratch", failing_commit)

    with pytest.raises(CommitError) as excinfo:
        write_note(
            tmp_path,
            "Kept",
            launch_fn=appending_editor("Kept\nbody"),
        )

    scratch = excinfo.value.scratch_path
    assert scratch is not None
    assert scratch.read_text(encoding="utf-8") == "# Kept\nbody"


def test_explicit_title_without_slug_falls_back_to_prompt(tmp_path: Path) -> None:
    dest = write_note(
        tmp_path,
        "***",
        launch_fn=untouched_editor,
        prompt_fn=answers("Named"),
        warn=lambda msg: None,
    )

    assert dest.name == "named.md"


def test_long_heading_still_commits(tmp_path: Path) -> None:
    dest = write_note(
        tmp_path,
        launch_fn=appending_editor("\n# " + "word " * 80),
        prompt_fn=answers("N"),
    )

    assert dest.exists()
    assert dest.parent == tmp_path
    assert len(dest.name) <= 90
    assert [p.name for p in tmp_path.iterdir()] == [dest.name]
