"""Tests for InputRouter event translation."""

import pytest

from camera import Camera, CameraMovement
from input_router import InputRouter, KeyDown, KeyUp, PointerMove, Wheel
from render_loop import FrameTiming


class RecordingCamera:
    """Camera stand-in that records the commands it receives."""

    def __init__(self):
        self.calls = []

    def process_keyboard_movement(self, direction, delta_time):
        self.calls.append(('move', direction, delta_time))

    def process_mouse_movement(self, dx, dy):
        self.calls.append(('look', dx, dy))

    def process_mouse_scroll(self, delta_y):
        self.calls.append(('scroll', delta_y))


@pytest.fixture
def timing():
    timing = FrameTiming()
    timing.tick(16.0)
    return timing


@pytest.fixture
def camera():
    return RecordingCamera()


class TestImpulseMode:

    @pytest.mark.parametrize("key, direction", [
        ('w', CameraMovement.FORWARD),
        ('s', CameraMovement.BACKWARD),
        ('a', CameraMovement.LEFT),
        ('d', CameraMovement.RIGHT),
    ])
    def test_key_down_moves_once_scaled_by_frame_delta(self, camera, timing, key, direction):
        router = InputRouter(camera, timing)
        router.handle(KeyDown(key))
        assert camera.calls == [('move', direction, pytest.approx(0.016))]

    def test_uppercase_keys_are_bound(self, camera, timing):
        router = InputRouter(camera, timing)
        router.handle(KeyDown('W'))
        assert camera.calls[0][1] == CameraMovement.FORWARD

    def test_delta_is_read_at_dispatch_time(self, camera, timing):
        router = InputRouter(camera, timing)
        router.post(KeyDown('w'))
        timing.tick(66.0)
        router.process_frame()
        assert camera.calls == [('move', CameraMovement.FORWARD, pytest.approx(0.05))]

    def test_unbound_keys_and_key_up_are_ignored(self, camera, timing):
        router = InputRouter(camera, timing)
        router.handle(KeyDown('q'))
        router.handle(KeyUp('w'))
        router.process_frame()
        assert camera.calls == []

    def test_each_delivery_is_one_impulse(self, camera, timing):
        router = InputRouter(camera, timing)
        for _ in range(3):
            router.post(KeyDown('d'))
        router.process_frame()
        router.process_frame()
        assert len(camera.calls) == 3


class TestPointerAndWheel:

    def test_pointer_deltas_are_forwarded_unscaled(self, camera, timing):
        router = InputRouter(camera, timing)
        router.handle(PointerMove(12, -7))
        assert camera.calls == [('look', 12, -7)]

    def test_wheel_delta_is_scaled(self, camera, timing):
        router = InputRouter(camera, timing, scroll_scale=0.01)
        router.handle(Wheel(120))
        assert camera.calls == [('scroll', pytest.approx(1.2))]

    def test_unknown_events_are_ignored(self, camera, timing):
        router = InputRouter(camera, timing)
        router.handle(object())
        assert camera.calls == []


class TestChannel:

    def test_post_defers_until_process_frame(self, camera, timing):
        router = InputRouter(camera, timing)
        router.post(PointerMove(1, 1))
        assert camera.calls == []
        router.process_frame()
        assert camera.calls == [('look', 1, 1)]
        assert not router.pending

    def test_events_are_dispatched_in_arrival_order(self, camera, timing):
        router = InputRouter(camera, timing)
        router.post(Wheel(100))
        router.post(PointerMove(3, 4))
        router.post(KeyDown('w'))
        router.process_frame()
        assert [call[0] for call in camera.calls] == ['scroll', 'look', 'move']

    def test_real_camera_sees_all_events_before_frame_ends(self, timing):
        camera = Camera(mouse_sensitivity=0.1)
        router = InputRouter(camera, timing)
        router.post(PointerMove(10, 5))
        router.post(Wheel(500))
        router.process_frame()
        assert camera.yaw == pytest.approx(-89.0)
        assert camera.pitch == pytest.approx(-0.5)
        assert camera.zoom == pytest.approx(40.0)


class TestPollMode:

    def test_held_key_moves_every_frame(self, camera, timing):
        router = InputRouter(camera, timing, key_mode='poll')
        router.post(KeyDown('w'))
        router.process_frame()
        router.process_frame()
        assert camera.calls == [('move', CameraMovement.FORWARD, pytest.approx(0.016))] * 2

    def test_key_down_alone_does_not_move(self, camera, timing):
        router = InputRouter(camera, timing, key_mode='poll')
        router.handle(KeyDown('w'))
        assert camera.calls == []
        assert router.keys_pressed == {'w'}

    def test_key_up_stops_movement(self, camera, timing):
        router = InputRouter(camera, timing, key_mode='poll')
        router.post(KeyDown('a'))
        router.process_frame()
        router.post(KeyUp('a'))
        router.process_frame()
        assert len(camera.calls) == 1

    def test_repeated_key_down_does_not_stack(self, camera, timing):
        router = InputRouter(camera, timing, key_mode='poll')
        for _ in range(5):
            router.post(KeyDown('s'))
        router.process_frame()
        assert len(camera.calls) == 1

    def test_release_keys_stops_held_movement(self, camera, timing):
        router = InputRouter(camera, timing, key_mode='poll')
        router.post(KeyDown('w'))
        router.post(KeyDown('d'))
        router.process_frame()
        router.release_keys()
        router.process_frame()
        assert len(camera.calls) == 2
        assert router.keys_pressed == set()

    def test_release_keys_after_queued_key_down(self, camera, timing):
        router = InputRouter(camera, timing, key_mode='poll')
        router.post(KeyDown('s'))
        router.release_keys()
        router.process_frame()
        assert camera.calls == []

    def test_invalid_mode(self, camera, timing):
        with pytest.raises(ValueError):
            InputRouter(camera, timing, key_mode='smooth')
