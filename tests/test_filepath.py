from datetime import datetime
from pathlib import Path

import pytest

from project_packager.config import PackagingRequest
from project_packager.errors import CollisionError, ExhaustedError
from project_packager.filepath import build_filename, get_filepath, get_timestamp


def _options(out_dir: Path, **kwargs) -> PackagingRequest:
    return PackagingRequest(name="build", output_dir=out_dir, **kwargs)


def test_timestamp_is_eight_digits_of_today():
    before = datetime.now().strftime("%Y%m%d")
    stamp = get_timestamp()
    after = datetime.now().strftime("%Y%m%d")
    assert len(stamp) == 8 and stamp.isdigit()
    assert stamp in {before, after}


def test_timestamp_pads_month_and_day():
    assert get_timestamp(datetime(2025, 1, 5, 23, 59)) == "20250105"
    assert get_timestamp(datetime(2024, 12, 31)) == "20241231"


def test_filename_segments():
    options = PackagingRequest(name="site", format="tar")
    assert build_filename(options) == "site.tar"
    assert build_filename(options, "20250105") == "site-20250105.tar"
    assert build_filename(options, "20250105", 3) == "site-20250105-3.tar"
    assert build_filename(options, "", 2) == "site-2.tar"


def test_filename_ignores_count_when_increment_disabled():
    options = PackagingRequest(name="site", increment=False)
    assert build_filename(options, "", 4) == "site.zip"


def test_first_probe_has_no_suffix(out_dir: Path):
    assert get_filepath(_options(out_dir, timestamp=False)) == out_dir / "build.zip"


def test_timestamp_segment(monkeypatch, out_dir: Path):
    monkeypatch.setattr("project_packager.filepath.get_timestamp", lambda: "20250105")
    assert get_filepath(_options(out_dir)) == out_dir / "build-20250105.zip"


def test_increment_takes_first_free_suffix(monkeypatch, out_dir: Path):
    monkeypatch.setattr("project_packager.filepath.get_timestamp", lambda: "20250105")
    options = _options(out_dir)

    (out_dir / "build-20250105.zip").touch()
    assert get_filepath(options) == out_dir / "build-20250105-1.zip"

    (out_dir / "build-20250105-1.zip").touch()
    assert get_filepath(options) == out_dir / "build-20250105-2.zip"


def test_increment_fills_first_gap(out_dir: Path):
    options = _options(out_dir, timestamp=False)
    (out_dir / "build.zip").touch()
    (out_dir / "build-2.zip").touch()
    assert get_filepath(options) == out_dir / "build-1.zip"


def test_collision_without_overwrite(out_dir: Path):
    existing = out_dir / "build.zip"
    existing.touch()
    with pytest.raises(CollisionError) as excinfo:
        get_filepath(_options(out_dir, timestamp=False, increment=False))
    assert excinfo.value.path == existing
    assert isinstance(excinfo.value, FileExistsError)
    assert sorted(p.name for p in out_dir.iterdir()) == ["build.zip"]


def test_overwrite_returns_existing_path(out_dir: Path):
    existing = out_dir / "build.zip"
    existing.touch()
    options = _options(out_dir, timestamp=False, increment=False, overwrite=True)
    assert get_filepath(options) == existing


def test_overwrite_ignored_when_incrementing(out_dir: Path):
    (out_dir / "build.zip").touch()
    options = _options(out_dir, timestamp=False, overwrite=True)
    assert get_filepath(options) == out_dir / "build-1.zip"


def test_exhausted_after_max_attempts(out_dir: Path):
    options = _options(out_dir, timestamp=False)
    (out_dir / "build.zip").touch()
    for n in range(1, 3):
        (out_dir / f"build-{n}.zip").touch()

    with pytest.raises(ExhaustedError) as excinfo:
        get_filepath(options, max_attempts=3)
    assert excinfo.value.attempts == 3
    assert excinfo.value.last_path == out_dir / "build-2.zip"
    assert get_filepath(options, max_attempts=4) == out_dir / "build-3.zip"


def test_start_count(out_dir: Path):
    assert get_filepath(_options(out_dir, timestamp=False), count=5) == out_dir / "build-5.zip"


def test_invalid_max_attempts(out_dir: Path):
    with pytest.raises(ValueError):
        get_filepath(_options(out_dir), max_attempts=0)


def test_allocation_does_not_write(out_dir: Path):
    get_filepath(_options(out_dir))
    assert list(out_dir.iterdir()) == []


def test_stamp_is_fixed_for_one_allocation(monkeypatch, out_dir: Path):
    stamps = iter(["20250105", "20250106", "20250107"])
    monkeypatch.setattr("project_packager.filepath.get_timestamp", lambda: next(stamps))
    (out_dir / "build-20250105.zip").touch()
    (out_dir / "build-20250106.zip").touch()

    assert get_filepath(_options(out_dir)) == out_dir / "build-20250105-1.zip"
