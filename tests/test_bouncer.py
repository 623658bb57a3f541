import pytest

from bouncers.bouncer import Bouncer
from bouncers.fixed import Fixed
from bouncers.rng import RandomSource
from bouncers.visual import SpriteFactory


def make_bouncer(x, y, vx, vy):
    b = Bouncer(SpriteFactory(), RandomSource(seed=0))
    b.sprite.set_position(x, y)
    b.x_speed, b.y_speed = Fixed(vx), Fixed(vy)
    return b


def test_initial_velocity_drawn_in_speed_range():
    rng = RandomSource(seed=5)
    for _ in range(50):
        b = Bouncer(SpriteFactory(), rng)
        assert all(Fixed(-5) <= v < Fixed(5) for v in b.velocity)


def test_starts_at_sprite_default_placement():
    b = Bouncer(SpriteFactory(), RandomSource(seed=5))
    assert b.position == (0, 0)


def test_free_flight_adds_velocity(viewport):
    b = make_bouncer(10, -10, 2.5, -1)
    b.update(viewport)
    assert b.position == (12.5, -11)
    assert b.velocity == (2.5, -1)


@pytest.mark.parametrize('start, speed, edge, axis', [
    ((118, 0), (5, 0), 120, 0),
    ((-118, 0), (-5, 0), -120, 0),
    ((0, 78), (0, 5), 80, 1),
    ((0, -78), (0, -5), -80, 1),
])
def test_reflects_and_clamps_at_each_edge(viewport, start, speed, edge, axis):
    b = make_bouncer(*start, *speed)
    b.update(viewport)
    assert b.position[axis] == edge
    assert b.velocity[axis] == -speed[axis]


def test_landing_exactly_on_edge_does_not_reflect(viewport):
    b = make_bouncer(115, 0, 5, 0)
    b.update(viewport)
    assert b.position == (120, 0)
    assert b.x_speed == 5


def test_reflection_leaves_other_axis_alone(viewport):
    b = make_bouncer(119, 10, 3, -2)
    b.update(viewport)
    assert b.x_speed == -3
    assert b.y_speed == -2
    assert b.position == (120, 8)


def test_corner_hit_flips_both_axes(viewport):
    b = make_bouncer(-119, 79, -4, 4)
    b.update(viewport)
    assert b.position == (-120, 80)
    assert b.velocity == (4, -4)


def test_position_stays_inside_viewport(viewport):
    b = make_bouncer(0, 0, 4.9, -3.7)
    for _ in range(1000):
        b.update(viewport)
        assert viewport.contains(*b.position)


def test_override_bypasses_physics(viewport):
    b = make_bouncer(0, 0, 5, 5)
    b.override_position(500, -500)
    assert b.position == (500, -500)
    assert b.velocity == (5, 5)


def test_position_is_read_through_sprite():
    b = make_bouncer(0, 0, 1, 1)
    b.sprite.set_position(7, 9)
    assert b.position == (7, 9)


class RecordingSprites(SpriteFactory):

    def __init__(self):
        super().__init__()
        self.calls = []

    def set_position(self, handle, x, y):
        self.calls.append(('set', handle, x, y))
        super().set_position(handle, x, y)

    def get_position(self, handle):
        self.calls.append(('get', handle))
        return super().get_position(handle)


def test_sprite_is_created_by_the_factory():
    sprites = RecordingSprites()
    b = Bouncer(sprites, RandomSource(seed=0))
    assert sprites.created == 1
    assert sprites.get_position(b.sprite) == (0, 0)


def test_update_reads_and_writes_through_factory(viewport):
    sprites = RecordingSprites()
    b = Bouncer(sprites, RandomSource(seed=0))
    b.x_speed, b.y_speed = Fixed(1), Fixed(-2)
    b.update(viewport)
    assert sprites.calls == [('get', b.sprite), ('set', b.sprite, 1, -2)]


def test_override_writes_through_factory():
    sprites = RecordingSprites()
    b = Bouncer(sprites, RandomSource(seed=0))
    b.override_position(3, 4)
    assert sprites.calls == [('set', b.sprite, 3, 4)]
    assert b.sprite.position == (3, 4)
