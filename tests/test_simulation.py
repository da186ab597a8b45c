import math

import numpy as np
import pytest

from gravtrails import constants as C
from gravtrails.errors import InvalidArgument, InvalidConfiguration
from gravtrails.presets import DEFAULT_SCENE
from gravtrails.simulation import SimulationController

TWO_BODY = [
    {"mass": 20000000, "position": {"x": 0, "y": 0, "z": 0}, "velocity": {"x": 0, "y": 0, "z": 0}},
    {"mass": 10000, "position": {"x": 100, "y": 0, "z": 0}, "velocity": {"x": 0, "y": 0, "z": -14}},
]


def _state(sim):
    return [(b.mass, b.pos.tolist(), b.vel.tolist(), len(b.trail)) for b in sim.bodies]


def test_default_scene_loaded():
    sim = SimulationController()
    assert len(sim.bodies) == len(DEFAULT_SCENE)
    assert sim.time_rate == C.DEFAULT_TIME_RATE
    assert sim.body_count == C.DEFAULT_BODY_COUNT
    assert sim.bodies[1].pos.tolist() == [100.0, 0.0, 0.0]


def test_tick_scales_elapsed_time():
    sim = SimulationController(TWO_BODY, time_rate=1.0)
    dt = sim.tick(1.0)
    assert dt == 1.0
    planet = sim.bodies[1]
    assert math.isclose(planet.pos[0], 98.0, rel_tol=1e-9)
    assert math.isclose(planet.pos[2], -14.0, rel_tol=1e-9)
    assert sim.simulation_time == 1.0


def test_time_rate_change_applies_on_next_tick():
    sim = SimulationController(TWO_BODY, time_rate=10.0)
    assert sim.tick(0.5) == 5.0
    sim.set_time_rate(2.0)
    assert sim.tick(0.5) == 1.0
    assert sim.simulation_time == 6.0


def test_tick_with_no_bodies_is_noop():
    sim = SimulationController([])
    assert sim.tick(0.016) == 0.0
    assert sim.bodies == []
    assert sim.positions().shape == (0, 3)


def test_tick_records_trails():
    sim = SimulationController(TWO_BODY, trail_length=3)
    for _ in range(5):
        sim.tick(0.01)
    for body, trail in zip(sim.bodies, sim.trails()):
        assert trail.shape == (3, 3)
        assert np.array_equal(trail[-1], body.pos)


def test_reset_rewinds_to_config():
    sim = SimulationController(TWO_BODY)
    initial = _state(sim)
    for _ in range(10):
        sim.tick(0.016)
    assert _state(sim) != initial
    sim.reset()
    assert _state(sim) == initial
    assert sim.simulation_time == 0.0


def test_reset_is_idempotent():
    sim = SimulationController(TWO_BODY)
    sim.reset()
    first = _state(sim)
    sim.reset()
    assert _state(sim) == first
    assert [b.pos.tolist() for b in sim.bodies] == [[0.0, 0.0, 0.0], [100.0, 0.0, 0.0]]


def test_reset_creates_new_body_objects():
    sim = SimulationController(TWO_BODY)
    old = sim.bodies
    sim.reset()
    assert sim.bodies is not old
    assert all(a is not b for a, b in zip(old, sim.bodies))


def test_randomize_uses_body_count():
    sim = SimulationController(rng=np.random.default_rng(0))
    sim.set_body_count(7)
    assert len(sim.bodies) == len(DEFAULT_SCENE)
    sim.randomize()
    assert len(sim.bodies) == 7
    assert len(sim.configs) == 7
    sim.randomize(2)
    assert len(sim.bodies) == 2
    assert sim.body_count == 2


def test_randomize_bounds():
    sim = SimulationController(rng=np.random.default_rng(42))
    sim.randomize(50)
    for body in sim.bodies:
        assert 10000 <= body.mass <= 110000
        assert 1 <= body.radius <= 6
        assert np.all((body.pos >= 0) & (body.pos < 400))
        assert np.all(np.abs(body.vel) <= 0.5)
        assert body.color is not None


def test_reset_after_randomize_keeps_random_scene():
    sim = SimulationController(rng=np.random.default_rng(3))
    sim.randomize(4)
    before = _state(sim)
    sim.tick(0.1)
    sim.reset()
    assert _state(sim) == before


def test_randomize_zero_bodies():
    sim = SimulationController()
    sim.randomize(0)
    assert sim.bodies == []
    assert sim.tick(1.0) == 0.0


def test_pause_gates_tick():
    sim = SimulationController(TWO_BODY)
    before = _state(sim)
    sim.pause()
    assert sim.tick(1.0) == 0.0
    assert _state(sim) == before
    assert sim.toggle_pause() is False
    assert sim.tick(1.0) > 0


@pytest.mark.parametrize("value", [-1, float("nan"), float("inf"), "fast", None])
def test_set_time_rate_rejects(value):
    sim = SimulationController()
    with pytest.raises(InvalidArgument):
        sim.set_time_rate(value)
    assert sim.time_rate == C.DEFAULT_TIME_RATE


@pytest.mark.parametrize("value", [-1, 2.5, "many", None, True])
def test_set_body_count_rejects(value):
    sim = SimulationController()
    with pytest.raises(InvalidArgument):
        sim.set_body_count(value)
    assert sim.body_count == C.DEFAULT_BODY_COUNT


def test_set_trail_length_applies_on_reset():
    sim = SimulationController(TWO_BODY)
    sim.set_trail_length(C.UNBOUNDED_TRAIL)
    assert sim.bodies[0].trail.cap == C.DEFAULT_TRAIL_LENGTH
    sim.reset()
    assert sim.bodies[0].trail.cap == C.UNBOUNDED_TRAIL
    with pytest.raises(InvalidArgument):
        sim.set_trail_length(-5)


def test_negative_elapsed_rejected():
    sim = SimulationController(TWO_BODY)
    with pytest.raises(InvalidArgument):
        sim.tick(-0.1)


@pytest.mark.parametrize("elapsed", [float("nan"), float("inf"), None, "soon"])
def test_non_finite_elapsed_rejected_without_touching_state(elapsed):
    sim = SimulationController(TWO_BODY)
    before = _state(sim)
    with pytest.raises(InvalidArgument):
        sim.tick(elapsed)
    assert _state(sim) == before
    assert sim.simulation_time == 0.0
    assert all(np.all(np.isfinite(b.pos)) for b in sim.bodies)


def test_resets_do_not_change_next_random_scene():
    fresh = SimulationController(rng=np.random.default_rng(11))
    fresh.randomize(4)

    reset_often = SimulationController(rng=np.random.default_rng(11))
    for _ in range(5):
        reset_often.reset()
    reset_often.randomize(4)

    assert reset_often.configs == fresh.configs


def test_colorless_configs_keep_their_color_across_resets():
    sim = SimulationController(TWO_BODY, rng=np.random.default_rng(2))
    colors = [b.color for b in sim.bodies]
    assert all(c is not None for c in colors)
    sim.reset()
    assert [b.color for b in sim.bodies] == colors


def test_set_configs_validates():
    sim = SimulationController(TWO_BODY)
    with pytest.raises(InvalidConfiguration):
        sim.set_configs([{"mass": 0, "position": [0, 0, 0], "velocity": [0, 0, 0]}])
    assert len(sim.bodies) == 2
    sim.set_configs(TWO_BODY[:1])
    assert len(sim.bodies) == 1


def test_constructor_rejects_bad_time_rate():
    with pytest.raises(InvalidArgument):
        SimulationController(time_rate=-50)


def test_controllers_are_independent():
    a = SimulationController(TWO_BODY)
    b = SimulationController(TWO_BODY)
    a.tick(1.0)
    assert b.bodies[1].pos.tolist() == [100.0, 0.0, 0.0]
