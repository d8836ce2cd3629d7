import gzip
import pytest
from pytest import approx
import numpy as np
from UmbrellaMBAR.utils import read_mdcrd_box


def _write_mdcrd(filename, frames, boxes, opener=open, trailing=""):
    with opener(filename, "wt") as file_handle:
        file_handle.write("ACE ALA NME\n")
        for x, b in zip(frames, boxes):
            for start in range(0, len(x), 10):
                file_handle.write("".join(f"{v:8.3f}" for v in x[start : start + 10]) + "\n")
            file_handle.write("".join(f"{v:8.3f}" for v in b) + "\n")
        file_handle.write(trailing)


@pytest.fixture
def setup_trajectory():
    rng = np.random.default_rng(0)
    natom = 4
    frames = np.round(rng.uniform(-999.0, 999.0, (3, 3 * natom)), 3)
    boxes = np.round(rng.uniform(20.0, 40.0, (3, 3)), 3)
    return natom, frames, boxes


def test_read_mdcrd_box(tmp_path, setup_trajectory):
    natom, frames, boxes = setup_trajectory
    filename = tmp_path / "run.mdcrd"
    _write_mdcrd(filename, frames, boxes)

    trj, box, title = read_mdcrd_box(natom, filename)
    assert title == "ACE ALA NME"
    assert trj.shape == (3, 3 * natom)
    assert trj == approx(frames, abs=1e-3)
    assert box == approx(boxes, abs=1e-3)


def test_read_gzipped_mdcrd_box(tmp_path, setup_trajectory):
    natom, frames, boxes = setup_trajectory
    filename = tmp_path / "run.mdcrd.gz"
    _write_mdcrd(filename, frames, boxes, opener=gzip.open)

    trj, box, title = read_mdcrd_box(natom, str(filename))
    assert trj == approx(frames, abs=1e-3)
    assert box == approx(boxes, abs=1e-3)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["run.mdcrd.gz"]


def test_atom_selection(tmp_path, setup_trajectory):
    natom, frames, boxes = setup_trajectory
    filename = tmp_path / "run.mdcrd"
    _write_mdcrd(filename, frames, boxes)

    trj, box, title = read_mdcrd_box(natom, filename, np.array([1, 3]))
    assert trj == approx(frames[:, [3, 4, 5, 9, 10, 11]], abs=1e-3)

    mask = np.array([True, False, False, True])
    trj, box, title = read_mdcrd_box(natom, filename, mask)
    assert trj == approx(frames[:, [0, 1, 2, 9, 10, 11]], abs=1e-3)

    with pytest.raises(ValueError):
        read_mdcrd_box(natom, filename, np.array([4]))
    with pytest.raises(ValueError):
        read_mdcrd_box(natom, filename, np.array([True, False]))


def test_incomplete_trailing_frame_is_discarded(tmp_path, setup_trajectory):
    natom, frames, boxes = setup_trajectory
    filename = tmp_path / "short.mdcrd"
    _write_mdcrd(filename, frames, boxes, trailing="   1.000   2.000   3.000\n")
    trj, box, title = read_mdcrd_box(natom, filename)
    assert trj.shape == (3, 3 * natom)
    assert box.shape == (3, 3)

    filename = tmp_path / "broken.mdcrd"
    _write_mdcrd(filename, frames, boxes, trailing="   1.000     abc   3.000\n")
    trj, box, title = read_mdcrd_box(natom, filename)
    assert trj.shape == (3, 3 * natom)


def test_empty_trajectory(tmp_path):
    filename = tmp_path / "empty.mdcrd"
    filename.write_text("title only\n")
    trj, box, title = read_mdcrd_box(2, filename)
    assert trj.shape == (0, 6)
    assert box.shape == (0, 3)
    assert title == "title only"


def test_invalid_arguments(tmp_path):
    with pytest.raises(ValueError):
        read_mdcrd_box(0, tmp_path / "run.mdcrd")
    with pytest.raises(FileNotFoundError):
        read_mdcrd_box(2, tmp_path / "missing.mdcrd")
