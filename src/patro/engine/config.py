from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from patro.calendar import SATURDAY, SUPPORTED_BS_YEARS, CalendarError, CalendarSystem


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Tunables of a CalendarEngine; the BS year bound is inclusive."""

    min_year: int = SUPPORTED_BS_YEARS[0]
    max_year: int = SUPPORTED_BS_YEARS[1]
    rest_weekday: int = SATURDAY
    default_system: CalendarSystem = CalendarSystem.BS
    upcoming_days: int = 7

    def __post_init__(self) -> None:
        if self.min_year > self.max_year:
            raise CalendarError(
                f"min_year {self.min_year} must not exceed max_year {self.max_year}."
            )
        if not 0 <= self.rest_weekday <= 6:
            raise CalendarError(f"rest_weekday must be in 0..6; got {self.rest_weekday}.")
        if self.upcoming_days < 0:
            raise CalendarError(f"upcoming_days must be >= 0; got {self.upcoming_days}.")
        object.__setattr__(self, "default_system", CalendarSystem(self.default_system))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
        """
        Read overrides from ``PATRO_MIN_BS_YEAR``, ``PATRO_MAX_BS_YEAR``,
        ``PATRO_REST_WEEKDAY``, ``PATRO_DEFAULT_SYSTEM`` and
        ``PATRO_UPCOMING_DAYS``; unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        for key, name in (
            ("PATRO_MIN_BS_YEAR", "min_year"),
            ("PATRO_MAX_BS_YEAR", "max_year"),
            ("PATRO_REST_WEEKDAY", "rest_weekday"),
            ("PATRO_UPCOMING_DAYS", "upcoming_days"),
        ):
            raw = env.get(key)
            if raw is None or not raw.strip():
                continue
            try:
                kwargs[name] = int(raw)
            except ValueError:
                raise CalendarError(f"{key} must be an integer; got {raw!r}.") from None

        system = env.get("PATRO_DEFAULT_SYSTEM")
        if system is not None and system.strip():
            try:
                kwargs["default_system"] = CalendarSystem(system.strip().upper())
            except ValueError:
                raise CalendarError(
                    f"PATRO_DEFAULT_SYSTEM must be BS or AD; got {system!r}."
                ) from None

        return cls(**kwargs)
