import pytest

from orrery.camera import PerspectiveCamera
from orrery.labels import LabelProjector


@pytest.fixture
def camera():
    cam = PerspectiveCamera(position=(0.0, 0.0, 10.0), target=(0.0, 0.0, 0.0))
    cam.set_viewport_size(800, 600)
    return cam


def test_target_projects_to_viewport_center(camera):
    x, y, depth = camera.world_to_screen((0.0, 0.0, 0.0))
    assert x == pytest.approx(400.0)
    assert y == pytest.approx(300.0)
    assert depth < 1.0


def test_screen_axes(camera):
    right_x, _, _ = camera.world_to_screen((1.0, 0.0, 0.0))
    _, up_y, _ = camera.world_to_screen((0.0, 1.0, 0.0))
    assert right_x > 400.0
    assert up_y < 300.0


def test_point_behind_camera_has_depth_beyond_one(camera):
    assert camera.project((0.0, 0.0, 20.0))[2] > 1.0


def test_label_offset_and_visibility(camera):
    projector = LabelProjector(offset_px=20)
    [label] = projector.project(camera, [("sun", "Sun", (0.0, 0.0, 0.0))], show_labels=True)
    assert label.visible
    assert label.name == "Sun"
    assert label.x == pytest.approx(400.0)
    assert label.y == pytest.approx(280.0)


def test_label_behind_camera_hidden(camera):
    projector = LabelProjector()
    [label] = projector.project(camera, [("earth", "Earth", (0.0, 0.0, 30.0))], show_labels=True)
    assert not label.visible


def test_show_labels_off_hides_everything(camera):
    projector = LabelProjector()
    labels = projector.project(camera, [("sun", "Sun", (0.0, 0.0, 0.0)),
                                        ("earth", "Earth", (1.0, 0.0, 0.0))], show_labels=False)
    assert not any(label.visible for label in labels)


def test_changed_only_on_visibility_flip(camera):
    projector = LabelProjector()
    entries = [("mars", "Mars", (0.0, 0.0, 0.0))]
    assert projector.project(camera, entries, True)[0].changed
    assert not projector.project(camera, entries, True)[0].changed
    assert projector.project(camera, entries, False)[0].changed
    assert not projector.last_visible("mars")


def test_zoom_is_clamped(camera):
    camera.zoom(20.0)
    camera.zoom(20.0)
    assert camera.distance() == pytest.approx(0.2)
    for _ in range(10):
        camera.zoom(0.05)
    assert camera.distance() == pytest.approx(800.0)


def test_look_at_keeps_offset(camera):
    camera.look_at((5.0, 1.0, -2.0))
    assert camera.target == (5.0, 1.0, -2.0)
    assert camera.position == pytest.approx((5.0, 1.0, 8.0))


def test_orbit_keeps_distance(camera):
    camera.orbit(0.7, 0.3)
    assert camera.distance() == pytest.approx(10.0)
    assert camera.target == (0.0, 0.0, 0.0)
