import numpy as np
import pytest

from junglekit.camera import CameraBasis, world_to_camera_space


def identity_basis():
    return CameraBasis((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def test_normalized_axes_have_unit_length():
    basis = CameraBasis((2.0, 0.0, 0.0), (0.0, 3.0, 4.0), (1.0, 1.0, 1.0)).normalized()
    for axis in (basis.right, basis.up, basis.forward):
        assert np.isclose(np.linalg.norm(axis), 1.0)


def test_normalized_keeps_directions():
    original = CameraBasis((2.0, 0.0, 0.0), (0.0, 3.0, 4.0), (0.0, 0.0, -7.0))
    basis = original.normalized()
    for before, after in (
        (original.right, basis.right),
        (original.up, basis.up),
        (original.forward, basis.forward),
    ):
        assert np.allclose(np.cross(before, after), 0.0)
        assert np.dot(before, after) > 0.0


def test_normalized_of_unit_basis_is_unchanged():
    basis = identity_basis()
    normalized = basis.normalized()
    assert np.allclose(normalized.right, basis.right)
    assert np.allclose(normalized.up, basis.up)
    assert np.allclose(normalized.forward, basis.forward)


def test_normalized_rejects_zero_axis():
    with pytest.raises(ValueError):
        CameraBasis((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)).normalized()


def test_basis_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        CameraBasis((1.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def test_identity_basis_leaves_offset_unchanged():
    offset = (1.5, -2.0, 3.25)
    result = world_to_camera_space(offset, identity_basis())
    assert np.allclose(result, offset)


def test_permuted_basis_permutes_components():
    basis = CameraBasis((0.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    result = world_to_camera_space((4.0, 5.0, 6.0), basis)
    assert np.allclose(result, (6.0, 4.0, 5.0))


def test_camera_looking_down_negative_z_sees_points_ahead_as_positive_depth():
    basis = CameraBasis((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, -1.0))
    ahead = world_to_camera_space((0.0, 0.0, -5.0), basis)
    behind = world_to_camera_space((0.0, 0.0, 5.0), basis)
    assert ahead[2] > 0.0
    assert behind[2] < 0.0


def test_orthonormal_basis_preserves_length():
    angle = 0.7
    basis = CameraBasis(
        (np.cos(angle), np.sin(angle), 0.0),
        (-np.sin(angle), np.cos(angle), 0.0),
        (0.0, 0.0, 1.0),
    )
    offset = np.array([3.0, -1.0, 2.0])
    result = world_to_camera_space(offset, basis)
    assert np.isclose(np.linalg.norm(result), np.linalg.norm(offset))