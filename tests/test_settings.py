import pytest
from pydantic import ValidationError

from constants import defaults
from main import parse_args, main
from schemas.settings import GameSettings


class TestGameSettings:
    def test_defaults(self):
        settings = GameSettings()
        assert settings.rows == defaults.ROWS
        assert settings.columns == defaults.COLUMNS
        assert settings.ticks_per_second == 3
        assert settings.initial_length == 3
        assert settings.exempt_segments == 3
        assert settings.tick_period == pytest.approx(1 / 3)
        assert settings.screen_size == (40 * 15, 40 * 15)

    @pytest.mark.parametrize("field", ["rows", "columns", "cell_size", "ticks_per_second", "initial_length"])
    def test_non_positive_values_rejected(self, field):
        with pytest.raises(ValidationError):
            GameSettings(**{field: 0})

    def test_grid_must_fit_the_snake(self):
        """Both sides of the grid need room for a regenerated snake."""
        with pytest.raises(ValidationError):
            GameSettings(columns=6, rows=40, initial_length=3)
        with pytest.raises(ValidationError):
            GameSettings(columns=40, rows=6, initial_length=3)
        assert GameSettings(columns=7, rows=7, initial_length=3).columns == 7


class TestCommandLine:
    def test_parse_defaults(self):
        args = parse_args([])
        assert args.rows == defaults.ROWS
        assert args.tps == defaults.UPDATE_PER_SEC
        assert args.seed is None
        assert not args.mute

    def test_parse_options(self):
        args = parse_args(["--rows", "20", "--columns", "30", "--tps", "5", "--seed", "7", "--mute"])
        assert (args.rows, args.columns, args.tps, args.seed, args.mute) == (20, 30, 5.0, 7, True)

    def test_invalid_settings_exit_code(self):
        """Bad settings are reported before any window is opened."""
        assert main(["--rows", "4"]) == 2
