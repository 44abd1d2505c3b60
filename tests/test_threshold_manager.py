import pytest

from nbfc.threshold_manager import TemperatureThreshold, ThresholdManager

T0 = TemperatureThreshold(0, 0, 0)
T1 = TemperatureThreshold(60, 48, 10)
T2 = TemperatureThreshold(63, 55, 20)
T3 = TemperatureThreshold(66, 59, 50)
T4 = TemperatureThreshold(68, 63, 70)
T5 = TemperatureThreshold(71, 67, 100)
ALL = [T0, T1, T2, T3, T4, T5]


def test_empty_thresholds_rejected():
    with pytest.raises(ValueError, match="Invalid size for TemperatureThresholds"):
        ThresholdManager([])


def test_thresholds_are_sorted():
    manager = ThresholdManager([T3, T0, T5, T1, T4, T2])
    assert manager.thresholds == tuple(ALL)
    assert manager.current() == T0


def test_legacy_stays_below_next_up_threshold():
    manager = ThresholdManager(ALL, legacy=True)
    assert manager.auto_select(50) == T0


def test_default_moves_past_reached_up_threshold():
    manager = ThresholdManager(ALL, legacy=False)
    assert manager.auto_select(50) == T1


def test_legacy_hysteresis():
    manager = ThresholdManager(ALL, legacy=True)
    assert manager.auto_select(61) == T1
    assert manager.auto_select(50) == T1
    assert manager.auto_select(45) == T0
    assert manager.current() == T0


def test_highest_temperature_selects_last():
    for legacy in (True, False):
        manager = ThresholdManager(ALL, legacy=legacy)
        assert manager.auto_select(200) == T5
        assert manager.auto_select(-10) == T0


def test_single_threshold_is_always_selected():
    manager = ThresholdManager([T2])
    assert manager.auto_select(100) == T2
    assert manager.auto_select(0) == T2


def test_selection_is_monotonic_in_temperature():
    for legacy in (True, False):
        previous = -1
        manager = ThresholdManager(ALL, legacy=legacy)
        for temperature in range(0, 100):
            idx = ALL.index(manager.auto_select(temperature))
            assert idx >= previous
            previous = idx