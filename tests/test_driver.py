"""Test the headless frame driver."""

import pytest

from spinwheel.animation.driver import SpinDriver
from spinwheel.core.config import default_config, merge_config
from spinwheel.core.types import SpinPhase
from spinwheel.physics.wheel_math import landing_sector
from spinwheel.physics.wheel_physics import decay_profile, frames_until_stop

WHEEL_SIZE = 300.0


@pytest.fixture
def landings():
    return []


@pytest.fixture
def driver(landings, haptics):
    return SpinDriver(8, on_land=landings.append, haptics=haptics)


def test_drag_release_starts_amplified_spin(driver, haptic_provider):
    driver.touch_began((250.0, 150.0), 0.0, WHEEL_SIZE)  # 0 deg
    assert driver.session.is_dragging

    applied = driver.touch_moved((150.0, 250.0), 0.1, WHEEL_SIZE)  # 90 deg
    assert applied == pytest.approx(90.0)
    assert driver.rotation == pytest.approx(90.0)

    generation = driver.touch_ended(0.1)

    assert generation == 1
    assert driver.session.is_spinning
    assert driver.session.angular_velocity == pytest.approx(900.0 * 1.5)
    assert haptic_provider.events == [("impact", "light"), ("impact", "medium")]


def test_release_without_momentum_does_not_spin(driver):
    driver.touch_began((250.0, 150.0), 0.0, WHEEL_SIZE)

    assert driver.touch_ended(0.2) is None
    assert driver.session.phase is SpinPhase.IDLE
    assert driver.session.generation == 0


def test_zero_duration_sample_keeps_release_velocity(driver):
    driver.touch_began((250.0, 150.0), 0.0, WHEEL_SIZE)
    driver.touch_moved((150.0, 250.0), 0.1, WHEEL_SIZE)
    driver.touch_moved((150.0, 250.0), 0.1, WHEEL_SIZE)

    driver.touch_ended(0.1)

    assert driver.session.angular_velocity == pytest.approx(1350.0)


def test_press_release_spins_with_hold_velocity(driver):
    driver.touch_began((150.0, 150.0), 0.0, WHEEL_SIZE)
    assert driver.session.is_pressing

    assert driver.touch_moved((150.0, 150.0), 0.5, WHEEL_SIZE) == 0.0
    assert driver.session.current_hold_duration == pytest.approx(0.5)

    generation = driver.touch_ended(1.0)

    assert generation == 1
    assert driver.session.angular_velocity == pytest.approx(600.0)


def test_touch_ended_without_touch_is_noop(driver):
    assert driver.touch_ended(1.0) is None


def test_run_until_stopped_lands_once(driver, landings, haptic_provider):
    driver.begin_spin(2000.0)

    index = driver.run_until_stopped()

    assert index == landing_sector(driver.rotation, 8)
    assert landings == [index]
    assert driver.frames_elapsed == frames_until_stop(2000.0)
    assert driver.rotation == pytest.approx(decay_profile(2000.0).total_rotation)
    assert haptic_provider.events.count(("notification", "success")) == 1
    assert not driver.session.is_spinning

    # Nothing left to resolve
    assert driver.tick() == 0.0
    assert driver.run_until_stopped() is None
    assert landings == [index]


def test_stale_completion_after_new_spin(driver, landings):
    g1 = driver.begin_spin(500.0)
    stale = driver.completion_callback(g1)
    g2 = driver.begin_spin(800.0)
    current = driver.completion_callback(g2)

    assert stale() is None
    index = current()
    assert index == landing_sector(driver.rotation, 8)
    assert current() is None
    assert landings == [index]


def test_touch_interrupts_pending_completion(driver, landings):
    g = driver.begin_spin(1000.0)
    pending = driver.completion_callback(g)

    driver.touch_began((250.0, 150.0), 0.5, WHEEL_SIZE)

    assert pending() is None
    assert landings == []


def test_stop_by_touch(driver, landings):
    g = driver.begin_spin(1500.0)
    for _ in range(30):
        driver.tick()

    index = driver.stop_by_touch(g)

    assert index == landing_sector(driver.rotation, 8)
    assert driver.stop_by_touch(g) is None
    assert driver.completion_callback(g)() is None
    assert driver.tick() == 0.0
    assert landings == [index]


def test_empty_wheel_never_lands(landings):
    driver = SpinDriver(0, on_land=landings.append)
    driver.begin_spin(100.0)

    assert driver.run_until_stopped() is None
    assert not driver.session.is_spinning
    assert landings == []


def test_set_sector_count_invalidates_spin(driver, landings):
    g = driver.begin_spin(900.0)
    driver.set_sector_count(6)

    assert driver.session.generation == 0
    assert driver.sector_count == 6
    assert driver.completion_callback(g)() is None
    assert landings == []


def test_touch_interrupt_then_weak_release_leaves_wheel_idle(driver, landings):
    g = driver.begin_spin(1000.0)

    driver.touch_began((250.0, 150.0), 0.5, WHEEL_SIZE)

    assert driver.session.phase is SpinPhase.DRAGGING
    assert driver.session.angular_velocity == 0.0

    assert driver.touch_ended(0.6) is None
    assert driver.session.phase is SpinPhase.IDLE
    assert driver.session.angular_velocity == 0.0
    assert driver.session.generation == g
    assert driver.tick() == 0.0
    assert landings == []


def test_completion_from_before_content_change_is_ignored(driver, landings):
    old = driver.completion_callback(driver.begin_spin(900.0))
    driver.set_sector_count(6)
    assert driver.content_epoch == 1

    g = driver.begin_spin(500.0)
    assert g == 1

    assert old() is None
    assert driver.session.is_spinning
    assert landings == []

    index = driver.completion_callback(g)()
    assert index == landing_sector(driver.rotation, 6)
    assert landings == [index]


def test_stop_by_touch_rejects_old_content_epoch(driver, landings):
    epoch = driver.content_epoch
    driver.begin_spin(900.0)
    driver.set_sector_count(6)
    g = driver.begin_spin(500.0)

    assert driver.stop_by_touch(g, epoch=epoch) is None
    assert driver.session.is_spinning

    index = driver.stop_by_touch(g, epoch=driver.content_epoch)
    assert index == landing_sector(driver.rotation, 6)
    assert landings == [index]


def test_negative_sector_count_rejected(driver):
    with pytest.raises(ValueError, match="sector_count"):
        SpinDriver(-1)
    with pytest.raises(ValueError, match="sector_count"):
        driver.set_sector_count(-2)


def test_max_frames_bound():
    config = merge_config(default_config(), {"driver": {"max_frames": 10}})
    driver = SpinDriver(8, config=config)
    driver.begin_spin(2000.0)

    assert driver.run_until_stopped() is None
    assert driver.session.is_spinning
    assert driver.frames_elapsed == 10


def test_begin_spin_clamps_to_configured_max():
    config = merge_config(default_config(), {"physics": {"max_velocity": 800.0}})
    driver = SpinDriver(8, config=config)
    driver.begin_spin(5000.0)

    assert driver.session.angular_velocity == 800.0


def test_counter_clockwise_spin_moves_backwards(driver):
    driver.rotation = 100.0
    driver.begin_spin(-600.0)
    driver.run_until_stopped()

    assert driver.rotation < 100.0
