from pydantic import BaseModel, Field, model_validator

from constants import defaults


class GameSettings(BaseModel):
    rows: int = Field(default=defaults.ROWS, gt=0)
    columns: int = Field(default=defaults.COLUMNS, gt=0)
    cell_size: int = Field(default=defaults.CELL_SIZE, gt=0)
    ticks_per_second: float = Field(default=defaults.UPDATE_PER_SEC, gt=0)
    initial_length: int = Field(default=defaults.INITIAL_LENGTH, gt=0)
    exempt_segments: int = Field(default=defaults.SELF_COLLISION_EXEMPT_SEGMENTS, ge=0)
    min_sleep: float = Field(default=defaults.MIN_SLEEP_SEC, ge=0)
    title: str = defaults.TITLE

    @model_validator(mode="after")
    def _check_snake_fits(self):
        # A regenerated snake needs `initial_length` free cells on both sides of its head
        if self.columns <= 2 * self.initial_length or self.rows <= 2 * self.initial_length:
            raise ValueError(
                f"Grid {self.columns}x{self.rows} is too small for a snake of "
                f"initial length {self.initial_length}"
            )
        return self

    @property
    def tick_period(self) -> float:
        return 1 / self.ticks_per_second

    @property
    def screen_size(self) -> tuple[int, int]:
        return (self.columns * self.cell_size, self.rows * self.cell_size)
