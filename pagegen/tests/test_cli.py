"""Tests for the pagegen command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagegen.cli.main import main, split_combined_target

NO_FLAGS = ["--no-search", "--no-interfaces", "--no-types", "--no-hooks"]


def _refuse(prompt: str) -> str:
    raise AssertionError(f"unexpected prompt: {prompt}")


def test_split_combined_target() -> None:
    assert split_combined_target("admin/users/UserList") == ("admin/users", "UserList")
    assert split_combined_target("UserList") == ("", "UserList")
    assert split_combined_target("/admin/UserList/") == ("admin", "UserList")


def test_separate_path_and_name(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(
        ["test/path", "TestPage", *NO_FLAGS, "--root", str(tmp_path)], reader=_refuse
    )

    assert exit_code == 0
    assert (tmp_path / "src/pages/test/path/TestPagePage.tsx").exists()
    out = capsys.readouterr().out
    assert "[pagegen] Generated page TestPage" in out
    assert "src/components/pages/test/path/TestPageComponent.tsx" in out
    assert "src/pages/test/index.ts" in out
    assert "Select the page generation options" not in out


def test_combined_path_and_name(tmp_path: Path) -> None:
    exit_code = main(
        ["--combined", "admin/users/UserList", *NO_FLAGS, "--root", str(tmp_path)],
        reader=_refuse,
    )

    assert exit_code == 0
    assert (tmp_path / "src/components/pages/admin/users/UserListComponent.tsx").exists()


def test_missing_arguments_are_prompted(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    answers = iter(["test/path", "test_page", "y", "y", "n", ""])

    exit_code = main(["--root", str(tmp_path)], reader=lambda prompt: next(answers))

    assert exit_code == 0
    component_dir = tmp_path / "src/components/pages/test/path"
    assert (component_dir / "TestPageCondition.tsx").exists()
    assert (tmp_path / "src/models/interfaces/test/path/index.ts").exists()
    assert not (tmp_path / "src/models/types").exists()
    assert not (tmp_path / "src/hooks").exists()
    assert "Select the page generation options" in capsys.readouterr().out


def test_closed_input_fails_cleanly(tmp_path: Path) -> None:
    def _eof(prompt: str) -> str:
        raise EOFError

    assert main(["--root", str(tmp_path)], reader=_eof) == 1
    assert not (tmp_path / "src").exists()


def test_invalid_config_fails_before_writing(tmp_path: Path) -> None:
    (tmp_path / "pagegen.yml").write_text("roots: nope\n", encoding="utf-8")

    exit_code = main(
        ["test/path", "TestPage", *NO_FLAGS, "--root", str(tmp_path)], reader=_refuse
    )

    assert exit_code == 1
    assert not (tmp_path / "src").exists()


def test_filesystem_errors_are_reported(tmp_path: Path) -> None:
    (tmp_path / "src").write_text("not a directory", encoding="utf-8")

    exit_code = main(
        ["test/path", "TestPage", *NO_FLAGS, "--root", str(tmp_path)], reader=_refuse
    )

    assert exit_code == 1


def test_too_many_arguments_is_a_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["a", "b", "c", "--root", str(tmp_path)], reader=_refuse)
    assert excinfo.value.code == 2


def test_combined_rejects_two_arguments(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--combined", "a/B", "C", "--root", str(tmp_path)], reader=_refuse)


def test_camel_case_path_argument_is_kept(tmp_path: Path) -> None:
    exit_code = main(
        ["admin/userList", "UserList", *NO_FLAGS, "--root", str(tmp_path)],
        reader=_refuse,
    )

    assert exit_code == 0
    assert (tmp_path / "src/pages/admin/userList/UserListPage.tsx").exists()
    assert not (tmp_path / "src/pages/admin/userlist").exists()
