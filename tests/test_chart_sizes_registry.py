import pytest

from synmind_ui.design import chart_sizes as cs


def test_preset_values():
    assert cs.CHART_SIZE_VALUES == {"sm": 200, "md": 280, "lg": 360}
    assert cs.CHART_MIN_SIZE == 200


def test_list_presets_ordered_by_pixels():
    assert [p.id for p in cs.list_presets()] == ["sm", "md", "lg"]
    assert all(p.pixels >= cs.CHART_MIN_SIZE for p in cs.list_presets())


def test_get_preset_unknown_raises():
    assert cs.get_preset("md").pixels == 280
    with pytest.raises(KeyError):
        cs.get_preset("xxl")


def test_duplicate_and_undersized_registration_rejected():
    with pytest.raises(ValueError):
        cs._register(cs.ChartSizePreset("sm", 240, "dup"))
    with pytest.raises(ValueError):
        cs._register(cs.ChartSizePreset("xs", 120, "too small"))


def test_chart_size_for_static_lookup():
    assert cs.chart_size_for(120) == 200
    assert cs.chart_size_for(640) == 640
    assert cs.chart_size_for("lg") == 360
    assert cs.chart_size_for("responsive", container_width=512) == 512
    assert cs.chart_size_for("responsive") == 280


def test_chart_size_for_container_width_is_not_clamped():
    assert cs.chart_size_for("responsive", container_width=50) == 50


def test_fixed_chart_size_rejects_non_finite():
    assert cs.fixed_chart_size(199.6) == 200
    with pytest.raises(ValueError):
        cs.fixed_chart_size(float("nan"))
    with pytest.raises(ValueError):
        cs.chart_size_for(float("inf"))
