"""Tests for rename planning and execution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from nist_vectors import EMPTY, NIST_1, VECTORS
from shamv.digest import DigestAlgorithm, DigestEngine, HashComputer
from shamv.errors import DigestError, MissingFileError
from shamv.renaming import (
    RenameExecutor,
    RenameOperation,
    RenamePlan,
    RenamePlanner,
    derive_destination,
    extension_of,
)

ABC_SHA256 = VECTORS["sha256"][NIST_1]
EMPTY_SHA256 = VECTORS["sha256"][EMPTY]


def _planner(algorithm: DigestAlgorithm = DigestAlgorithm.SHA256) -> RenamePlanner:
    return RenamePlanner(HashComputer(DigestEngine(algorithm)))


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("data.txt", "txt"),
        ("archive.tar.gz", "gz"),
        ("file_without_extension", None),
        (".bashrc", None),
        ("trailing.", None),
    ],
)
def test_extension_of(name: str, expected: str | None) -> None:
    assert extension_of(Path("/tmp") / name) == expected


def test_derive_destination_keeps_directory_and_extension() -> None:
    source = Path("/data/nested/data.txt")

    destination = derive_destination(source, ABC_SHA256)

    assert destination == Path(f"/data/nested/{ABC_SHA256}.txt")


def test_derive_destination_without_extension_has_no_trailing_dot() -> None:
    destination = derive_destination(Path("notes"), ABC_SHA256)

    assert destination == Path(ABC_SHA256)


def test_validate_stops_at_first_missing_path(tmp_path: Path) -> None:
    present = tmp_path / "present.txt"
    present.write_bytes(NIST_1)
    first_missing = tmp_path / "missing-one"
    second_missing = tmp_path / "missing-two"

    with pytest.raises(MissingFileError) as excinfo:
        _planner().validate([present, first_missing, second_missing])

    assert excinfo.value.path == first_missing
    assert "file not found" in str(excinfo.value)


def test_build_plan_orders_operations_like_inputs(tmp_path: Path) -> None:
    abc = tmp_path / "NIST.1.txt"
    abc.write_bytes(NIST_1)
    empty = tmp_path / "empty"
    empty.write_bytes(EMPTY)

    plan = _planner().build_plan([abc, empty])

    assert plan.algorithm is DigestAlgorithm.SHA256
    assert [op.source for op in plan.operations] == [abc, empty]
    assert plan.operations[0].destination == tmp_path / f"{ABC_SHA256}.txt"
    assert plan.operations[1].destination == tmp_path / EMPTY_SHA256
    assert plan.operations[0].digest == ABC_SHA256


def test_build_plan_is_stable_for_unchanged_content(tmp_path: Path) -> None:
    path = tmp_path / "report.csv"
    path.write_bytes(b"a,b,c\n")
    planner = _planner(DigestAlgorithm.SHA384)

    assert planner.build_plan([path]) == planner.build_plan([path])


def test_build_plan_depends_only_on_content_and_extension(tmp_path: Path) -> None:
    first = tmp_path / "one" / "alpha.txt"
    second = tmp_path / "two" / "beta.txt"
    for path in (first, second):
        path.parent.mkdir()
        path.write_bytes(NIST_1)

    plan = _planner().build_plan([first, second])

    names = {op.destination.name for op in plan.operations}
    assert names == {f"{ABC_SHA256}.txt"}


def test_build_plan_aborts_on_unreadable_path(tmp_path: Path) -> None:
    readable = tmp_path / "readable.txt"
    readable.write_bytes(NIST_1)
    directory = tmp_path / "directory"
    directory.mkdir()

    with pytest.raises(DigestError):
        _planner().build_plan([readable, directory])

    assert readable.exists()


def test_executor_dry_run_leaves_files_untouched(tmp_path: Path) -> None:
    source = tmp_path / "data.txt"
    source.write_bytes(NIST_1)
    plan = _planner().build_plan([source])

    report = RenameExecutor().apply(plan, dry_run=True)

    assert report.dry_run is True
    assert report.previewed == plan.operations
    assert report.renamed == []
    assert source.exists()
    assert not plan.operations[0].destination.exists()


def test_executor_renames_in_place(tmp_path: Path) -> None:
    source = tmp_path / "data.txt"
    source.write_bytes(NIST_1)
    plan = _planner().build_plan([source])

    report = RenameExecutor().apply(plan)

    destination = tmp_path / f"{ABC_SHA256}.txt"
    assert report.renamed == plan.operations
    assert not report.has_failures
    assert not source.exists()
    assert destination.read_bytes() == NIST_1


def test_executor_skips_files_already_named_by_digest(tmp_path: Path) -> None:
    source = tmp_path / f"{ABC_SHA256}.txt"
    source.write_bytes(NIST_1)
    plan = _planner().build_plan([source])

    report = RenameExecutor().apply(plan)

    assert report.skipped == plan.operations
    assert not report.has_failures
    assert source.exists()


def test_executor_reports_collision_and_continues(tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    other = tmp_path / "other.bin"
    first.write_bytes(NIST_1)
    second.write_bytes(NIST_1)
    other.write_bytes(EMPTY)
    plan = _planner().build_plan([first, second, other])

    report = RenameExecutor().apply(plan)

    assert report.has_failures
    assert [failure.source for failure in report.failures] == [second]
    assert "destination already exists" in report.failures[0].message
    assert second.exists()
    assert (tmp_path / f"{ABC_SHA256}.txt").exists()
    assert (tmp_path / f"{EMPTY_SHA256}.bin").exists()
    assert not other.exists()


def test_executor_overwrite_policy_replaces_destination(tmp_path: Path) -> None:
    source = tmp_path / "data.txt"
    source.write_bytes(NIST_1)
    destination = tmp_path / f"{ABC_SHA256}.txt"
    destination.write_bytes(b"stale")
    plan = _planner().build_plan([source])

    report = RenameExecutor(on_conflict="overwrite").apply(plan)

    assert not report.has_failures
    assert not source.exists()
    assert destination.read_bytes() == NIST_1


def test_executor_records_os_errors_per_file(tmp_path: Path) -> None:
    present = tmp_path / "present.txt"
    present.write_bytes(NIST_1)
    vanished = tmp_path / "vanished.txt"
    plan = RenamePlan(
        algorithm=DigestAlgorithm.SHA256,
        operations=[
            RenameOperation(source=vanished, destination=tmp_path / "x.txt", digest="x"),
            RenameOperation(
                source=present, destination=tmp_path / f"{ABC_SHA256}.txt", digest=ABC_SHA256
            ),
        ],
    )

    report = RenameExecutor().apply(plan)

    assert [failure.source for failure in report.failures] == [vanished]
    assert report.failures[0].message.startswith("error renaming file vanished.txt")
    assert [op.source for op in report.renamed] == [present]


def test_validate_treats_unreadable_status_as_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    hidden = tmp_path / "locked" / "data.txt"
    real_stat = os.stat

    def _stat(path, *args, **kwargs):
        if os.fspath(path) == str(hidden):
            raise PermissionError(13, "Permission denied", str(hidden))
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", _stat)

    with pytest.raises(MissingFileError) as excinfo:
        _planner().validate([hidden])

    assert excinfo.value.path == hidden


def test_executor_fail_policy_keeps_dangling_symlink(tmp_path: Path) -> None:
    source = tmp_path / "data.txt"
    source.write_bytes(NIST_1)
    destination = tmp_path / f"{ABC_SHA256}.txt"
    try:
        destination.symlink_to(tmp_path / "nowhere")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not available")
    plan = _planner().build_plan([source])

    report = RenameExecutor().apply(plan)

    assert [failure.source for failure in report.failures] == [source]
    assert "destination already exists" in report.failures[0].message
    assert destination.is_symlink()
    assert source.read_bytes() == NIST_1
