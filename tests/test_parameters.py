import dataclasses

import pytest

from emawindow.engines import FastEmaEngine, WindowedEmaEngine
from emawindow.parameters import DEFAULT_PARAMETERS, EmaParameters


class TestEmaParameters:
    def test_derives_alpha(self) -> None:
        params = EmaParameters(window_size=5, smoothing=2.0)
        assert params.alpha == pytest.approx(2.0 / 6.0)

    def test_reference_defaults(self) -> None:
        params = EmaParameters()
        assert params.window_size == 30
        assert params.smoothing == 2.0
        assert params.alpha == pytest.approx(2.0 / 31.0)

    @pytest.mark.parametrize("window_size", [0, -5])
    def test_rejects_non_positive_window_size(self, window_size) -> None:
        with pytest.raises(ValueError):
            EmaParameters(window_size=window_size)

    @pytest.mark.parametrize("smoothing", [0.0, -2.0])
    def test_rejects_non_positive_smoothing(self, smoothing) -> None:
        with pytest.raises(ValueError):
            EmaParameters(window_size=5, smoothing=smoothing)

    def test_rejects_alpha_outside_unit_interval(self) -> None:
        # 2 / (1 + 1) == 1
        with pytest.raises(ValueError):
            EmaParameters(window_size=1, smoothing=2.0)

        with pytest.raises(ValueError):
            EmaParameters(window_size=5, smoothing=7.0)

    def test_is_immutable(self) -> None:
        params = EmaParameters(window_size=5)

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.window_size = 10  # type: ignore[misc]

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.alpha = 0.5  # type: ignore[misc]

    def test_alpha_is_not_a_constructor_argument(self) -> None:
        with pytest.raises(TypeError):
            EmaParameters(window_size=5, alpha=0.5)  # type: ignore[call-arg]


class TestDefaultParameters:
    def test_built_from_settings_at_import(self) -> None:
        from emawindow.config import settings

        assert DEFAULT_PARAMETERS.window_size == settings.window_size
        assert DEFAULT_PARAMETERS.smoothing == settings.smoothing

    def test_later_settings_changes_do_not_reach_engines(self, monkeypatch) -> None:
        from emawindow.config import settings

        window_size = DEFAULT_PARAMETERS.window_size
        monkeypatch.setattr(settings, "window_size", window_size + 7)

        assert FastEmaEngine().parameters is DEFAULT_PARAMETERS
        assert WindowedEmaEngine().parameters.window_size == window_size

    def test_explicit_parameters_override_defaults(self) -> None:
        params = EmaParameters(window_size=10)

        assert FastEmaEngine(params).parameters.window_size == 10
        assert WindowedEmaEngine(params).warmup_periods() == 10
