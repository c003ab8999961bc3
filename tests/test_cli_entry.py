"""Tests for the command-line front end"""

import pytest

from bulk_renamer.cli import main, preview_main
from bulk_renamer.main import main as program_main
from conftest import make_files, listing


def test_seq_defaults(work_dir, capsys):
    make_files(work_dir, "alpha.jpg", "beta.jpg", "gamma.jpg")

    assert main(["--mode", "seq", "--dir", str(work_dir)]) == 0

    assert listing(work_dir) == ["001-alpha.jpg", "002-beta.jpg", "003-gamma.jpg"]
    out = capsys.readouterr().out
    assert f"Renaming files in: {work_dir}" in out
    assert "alpha.jpg -> 001-alpha.jpg" in out


def test_seq_custom_start_and_pad(work_dir):
    make_files(work_dir, "a.txt", "b.txt")

    assert main(["--mode", "seq", "--dir", str(work_dir), "--start", "10", "--pad", "5"]) == 0

    assert listing(work_dir) == ["00010-a.txt", "00011-b.txt"]


def test_replace_scenario(work_dir):
    make_files(work_dir, "draft-report.txt", "draft-notes.txt", "readme.txt")

    code = main(["--mode", "replace", "--dir", str(work_dir),
                 "--find", "draft-", "--replace", "final-"])

    assert code == 0
    assert listing(work_dir) == ["final-notes.txt", "final-report.txt", "readme.txt"]


def test_lower_exact_case(work_dir):
    make_files(work_dir, "MyPhoto.JPG", "README.TXT", "already-lower.txt")

    assert main(["--mode", "lower", "--dir", str(work_dir)]) == 0

    assert listing(work_dir) == ["already-lower.txt", "myphoto.jpg", "readme.txt"]


@pytest.mark.parametrize("mode_args", [
    ["--mode", "seq"],
    ["--mode", "date"],
    ["--mode", "replace", "--find", "file", "--replace", "doc"],
    ["--mode", "lower"],
])
def test_dry_run_never_mutates(work_dir, capsys, mode_args):
    make_files(work_dir, "file1.txt", "File2.TXT")
    before = listing(work_dir)

    assert main(mode_args + ["--dir", str(work_dir), "--dry-run"]) == 0

    assert listing(work_dir) == before
    assert "[DRY RUN] Previewing changes in:" in capsys.readouterr().out


def test_dry_run_shows_plan(work_dir, capsys):
    make_files(work_dir, "file1.txt", "file2.txt")

    main(["--mode", "seq", "--dir", str(work_dir), "--dry-run"])

    out = capsys.readouterr().out
    assert "file1.txt -> 001-file1.txt" in out
    assert "file2.txt -> 002-file2.txt" in out


def test_preview_entry_forces_dry_run(work_dir, capsys):
    make_files(work_dir, "MyPic.PNG")

    assert preview_main(["--mode", "lower", "--dir", str(work_dir)]) == 0

    assert listing(work_dir) == ["MyPic.PNG"]
    out = capsys.readouterr().out
    assert "DRY RUN" in out
    assert "MyPic.PNG -> mypic.png" in out


def test_no_files_message(work_dir, capsys):
    make_files(work_dir, "already.txt")

    assert main(["--mode", "lower", "--dir", str(work_dir)]) == 0

    assert "(no files to rename)" in capsys.readouterr().out


def test_no_match_message(work_dir, capsys):
    make_files(work_dir, "a.txt")

    code = main(["--mode", "replace", "--dir", str(work_dir), "--find", "zzz", "--replace", "y"])

    assert code == 0
    assert "(no files matching 'zzz' to rename)" in capsys.readouterr().out
    assert listing(work_dir) == ["a.txt"]


def test_conflicting_plan_renames_nothing(work_dir, capsys):
    make_files(work_dir, "a1.txt", "a2.txt")

    code = main(["--mode", "replace", "--dir", str(work_dir), "--find", "1", "--replace", "2"])

    assert code == 1
    assert listing(work_dir) == ["a1.txt", "a2.txt"]
    assert "already exists" in capsys.readouterr().err


def test_unformattable_mtime_reports_error(work_dir, capsys, monkeypatch):
    make_files(work_dir, "photo.jpg")

    def overflow(timestamp):
        raise OverflowError("timestamp out of range for platform time_t")

    monkeypatch.setattr("bulk_renamer.core.name_rules.format_date", overflow)

    assert main(["--mode", "date", "--dir", str(work_dir)]) == 1
    assert listing(work_dir) == ["photo.jpg"]
    assert "Error: Cannot format modification date of photo.jpg" in capsys.readouterr().err


class TestInvalidInvocation:

    def test_missing_mode(self, work_dir):
        with pytest.raises(SystemExit) as exc_info:
            main(["--dir", str(work_dir)])
        assert exc_info.value.code != 0

    def test_invalid_mode(self, work_dir):
        with pytest.raises(SystemExit) as exc_info:
            main(["--mode", "bogus", "--dir", str(work_dir)])
        assert exc_info.value.code != 0

    def test_negative_pad(self, work_dir):
        with pytest.raises(SystemExit):
            main(["--mode", "seq", "--dir", str(work_dir), "--pad", "-1"])

    def test_replace_without_find(self, work_dir, capsys):
        make_files(work_dir, "x.txt")

        assert main(["--mode", "replace", "--dir", str(work_dir), "--replace", "y"]) == 1
        assert "--find is required" in capsys.readouterr().err
        assert listing(work_dir) == ["x.txt"]

    def test_replace_without_replace(self, work_dir, capsys):
        assert main(["--mode", "replace", "--dir", str(work_dir), "--find", "x"]) == 1
        assert "--replace is required" in capsys.readouterr().err

    def test_nonexistent_dir(self, tmp_path, capsys):
        assert main(["--mode", "seq", "--dir", str(tmp_path / "nope")]) == 1
        assert "does not exist" in capsys.readouterr().err


def test_program_entry_defaults_to_cli(work_dir):
    make_files(work_dir, "A.TXT")

    assert program_main(["--mode", "lower", "--dir", str(work_dir)]) == 0

    assert listing(work_dir) == ["a.txt"]
