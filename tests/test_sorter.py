import os
from pathlib import Path

from sortfiles.reporter import Reporter
from sortfiles.sorter import FileSorter

from conftest import CapturedConsole

SCREENSHOT = "Screenshot 2024-01-01 at 1.00.00.png"


def make_files(folder: Path, *names: str) -> None:
    folder.mkdir(parents=True, exist_ok=True)
    for name in names:
        (folder / name).write_text(name)


def tree(root: Path):
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


def run(config, dry_run=False, verbose=False):
    console = CapturedConsole()
    counters = FileSorter(config, Reporter(console, verbose=verbose), dry_run=dry_run).run()
    return counters, console.output


def test_end_to_end(config, home):
    downloads = home / "Downloads"
    make_files(downloads, "photo.JPG", SCREENSHOT, "archive.zip", "notes.txt",
               "mystery.xyz", ".DS_Store")

    counters, output = run(config)

    assert (home / "Media" / "Photos" / "photo.JPG").read_text() == "photo.JPG"
    assert (home / "Media" / "Screenshots" / SCREENSHOT).exists()
    assert (home / "Archive" / "Compressed" / "archive.zip").exists()
    assert (home / "Docs" / "Text" / "notes.txt").exists()
    assert sorted(p.name for p in downloads.iterdir()) == [".DS_Store", "mystery.xyz"]
    assert counters.total_processed == 6
    assert counters.total_moved == 4
    assert counters.total_failed == 0
    assert ".DS_Store" not in output
    assert "mystery.xyz" not in output
    assert "Moved:" in output


def test_destination_roots_created(config, home):
    run(config)
    for root in ("Media", "Archive", "Docs", "3D"):
        assert (home / root).is_dir()


def test_camera_folder_and_plain_folder(config, home):
    downloads = home / "Downloads"
    (downloads / "CANON100").mkdir(parents=True)
    (downloads / "CANON100" / "IMG_0001.JPG").write_text("x")
    (downloads / "Subfolder").mkdir()
    (downloads / "Subfolder" / "inner.txt").write_text("x")

    counters, output = run(config)

    assert (home / "Media" / "Camera" / "CANON100" / "IMG_0001.JPG").exists()
    assert (downloads / "Subfolder" / "inner.txt").exists()
    assert counters.total_processed == 1
    assert "Skipping directory" not in output

    _, verbose_output = run(config, verbose=True)
    assert f"Skipping directory: {downloads / 'Subfolder'}" in verbose_output


def test_collisions_across_sources(config, home):
    make_files(home / "Desktop", "notes.txt")
    make_files(home / "Documents", "notes.txt")

    counters, _ = run(config)

    text_dir = home / "Docs" / "Text"
    assert sorted(p.name for p in text_dir.iterdir()) == ["notes.txt", "notes_1.txt"]
    # Desktop is scanned before Documents
    assert (text_dir / "notes.txt").read_text() == "notes.txt"
    assert counters.total_moved == 2


def test_existing_destination_is_kept(config, home):
    make_files(home / "Docs" / "Pdf", "report.pdf")
    (home / "Docs" / "Pdf" / "report.pdf").write_text("original")
    make_files(home / "Downloads", "report.pdf")

    run(config)

    assert (home / "Docs" / "Pdf" / "report.pdf").read_text() == "original"
    assert (home / "Docs" / "Pdf" / "report_1.pdf").read_text() == "report.pdf"


def test_dry_run_is_idempotent(config, home):
    make_files(home / "Downloads", "photo.jpg", "song.mp3", "mystery.xyz", "Thumbs.db")
    make_files(home / "Desktop", "shot.raw")
    before = tree(home)

    first_counters, first = run(config, dry_run=True, verbose=True)
    assert tree(home) == before
    second_counters, second = run(config, dry_run=True, verbose=True)
    assert tree(home) == before

    assert first == second
    assert first_counters.total_processed == 5
    assert first_counters.total_moved == 0
    assert "Would move:" in first
    assert "Would create directory:" in first
    assert "Ignoring: Thumbs.db (matches pattern: Thumbs.db)" in first
    assert "No rule for file type, leaving in place:" in first


def test_missing_sources_are_warnings(config, home, console):
    counters = FileSorter(config, Reporter(console), dry_run=False).run()
    assert counters.total_processed == 0
    for source in config.source_dirs:
        assert f"[WARNING] Source directory does not exist: {source}" in console.output


def test_broken_symlink_is_skipped(config, home):
    downloads = home / "Downloads"
    downloads.mkdir()
    os.symlink(home / "missing.txt", downloads / "broken.txt")

    counters, output = run(config)

    assert counters.total_processed == 1
    assert counters.total_moved == 0
    assert f"[WARNING] File does not exist: {downloads / 'broken.txt'}" in output
    assert (downloads / "broken.txt").is_symlink()


def test_failed_move_does_not_stop_the_run(config, home, monkeypatch):
    import sortfiles.mover as mover

    make_files(home / "Downloads", "a.pdf", "b.pdf")
    real_move = mover.shutil.move

    def flaky_move(src, dst):
        if src.endswith("a.pdf"):
            raise PermissionError("denied")
        return real_move(src, dst)

    monkeypatch.setattr(mover.shutil, "move", flaky_move)

    counters, output = run(config)

    assert counters.total_failed == 1
    assert counters.total_moved == 1
    assert (home / "Downloads" / "a.pdf").exists()
    assert (home / "Docs" / "Pdf" / "b.pdf").exists()
    assert "[ERROR] Failed to move" in output


def test_ignored_files_are_left_alone(config, home):
    make_files(home / "Downloads", "dont_move_me.txt", "video.mp4.part", ".localized")

    counters, output = run(config, verbose=True)

    assert sorted(p.name for p in (home / "Downloads").iterdir()) == [
        ".localized", "dont_move_me.txt", "video.mp4.part",
    ]
    assert counters.total_processed == 3
    assert "Ignoring: video.mp4.part (matches pattern: *.part)" in output
    assert ".localized" not in output


def test_dangling_link_matching_ignore_rule_is_ignored(config, home):
    downloads = home / "Downloads"
    downloads.mkdir()
    os.symlink(home / "missing.db", downloads / "Thumbs.db")
    os.symlink(home / "missing", downloads / ".DS_Store")

    counters, output = run(config, verbose=True)

    assert counters.total_processed == 2
    assert "File does not exist" not in output
    assert "Ignoring: Thumbs.db (matches pattern: Thumbs.db)" in output
    assert ".DS_Store" not in output


def test_symlink_to_file_moves_the_link(config, home, tmp_path):
    target = tmp_path / "elsewhere" / "manual.pdf"
    target.parent.mkdir()
    target.write_text("content")
    downloads = home / "Downloads"
    downloads.mkdir()
    os.symlink(target, downloads / "manual.pdf")

    counters, _ = run(config)

    moved = home / "Docs" / "Pdf" / "manual.pdf"
    assert counters.total_moved == 1
    assert moved.is_symlink()
    assert os.readlink(moved) == str(target)
    assert target.read_text() == "content"
    assert not (downloads / "manual.pdf").exists()
    assert not (downloads / "manual.pdf").is_symlink()
