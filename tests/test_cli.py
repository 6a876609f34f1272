import builtins

from dirsort.cli import run_cli, build_parser


def run(target_dir, log_dir, *args):
    return run_cli([str(target_dir), "--log-dir", str(log_dir), "-q", *args])


def test_auto_detect_preview_moves_nothing(target_dir, log_dir, make_files, capsys):
    make_files("trip_paris_01.jpg", "trip_paris_02.jpg")

    assert run(target_dir, log_dir, "--auto") == 0

    out = capsys.readouterr().out
    assert "paris(2)" in out
    assert "--execute" in out
    assert (target_dir / "trip_paris_01.jpg").exists()
    assert not (target_dir / "paris").exists()


def test_auto_detect_execute(target_dir, log_dir, make_files):
    make_files("trip_paris_01.jpg", "trip_paris_02.jpg", "invoice.pdf")

    assert run(target_dir, log_dir, "--auto", "--execute", "-y") == 0

    assert (target_dir / "paris" / "trip_paris_01.jpg").exists()
    assert (target_dir / "invoice.pdf").exists()


def test_by_name_execute(target_dir, log_dir, make_files, capsys):
    make_files("report.txt", "report_final.txt", "notes.txt")

    assert run(target_dir, log_dir, "--by-name", "Report", "--execute", "-y") == 0

    assert sorted(p.name for p in (target_dir / "Report").iterdir()) == [
        "report.txt", "report_final.txt"]
    assert (target_dir / "notes.txt").exists()


def test_execute_requires_confirmation(target_dir, log_dir, make_files, monkeypatch, capsys):
    make_files("photo.jpg")
    monkeypatch.setattr(builtins, "input", lambda prompt="": "no")

    assert run(target_dir, log_dir, "--by-type", "--execute") == 0

    assert (target_dir / "photo.jpg").exists()
    assert "취소" in capsys.readouterr().out


def test_by_type_execute(target_dir, log_dir, make_files):
    make_files("photo.jpg", "setup.exe")

    assert run(target_dir, log_dir, "--by-type", "--execute", "-y") == 0

    assert (target_dir / "Images" / "photo.jpg").exists()
    assert (target_dir / "setup.exe").exists()


def test_list(target_dir, log_dir, make_files, capsys):
    make_files("photo.jpg", "paper.pdf")

    assert run(target_dir, log_dir, "--list") == 0

    out = capsys.readouterr().out
    assert "-- Images --" in out
    assert "paper.pdf" in out


def test_invalid_target(tmp_path, log_dir, capsys):
    assert run(tmp_path / "missing", log_dir, "--auto") == 1
    assert "오류" in capsys.readouterr().out


def test_interactive_menu(target_dir, log_dir, make_files, monkeypatch):
    make_files("trip_paris_01.jpg", "trip_paris_02.jpg")
    answers = iter(["2", str(target_dir), "", "0"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert run(target_dir, log_dir, "--execute", "-y") == 0

    assert (target_dir / "paris" / "trip_paris_02.jpg").exists()


def test_tuning_flags_default_to_interactive_mode():
    parser = build_parser()
    args = parser.parse_args(["dir", "--strict-tokens", "--allow-overlap"])
    assert args.strict_tokens and args.allow_overlap
    assert args.by_name is None
