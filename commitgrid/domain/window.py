"""
Lookback window domain object for commitgrid.

StatsWindow carries the window length and the reference "now" for one
stats run, so every component buckets commits against the same clock.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from ..config import DAYS_IN_WINDOW
from ..exit_codes import ConfigError

# Returned by count_days_since for commits older than the window
OUT_OF_RANGE = 99999

ONE_DAY = timedelta(days=1)


def beginning_of_day(moment: datetime, local: bool = False) -> datetime:
    """
    Midnight of the same day as ``moment``.

    With ``local`` the day boundary follows the system time zone's rules, so
    a DST change between midnight and ``moment`` gives midnight its own
    offset. Otherwise the tzinfo of ``moment`` is kept.
    """
    if local:
        naive = moment.astimezone().replace(tzinfo=None)
        return naive.replace(hour=0, minute=0, second=0, microsecond=0).astimezone()
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


@dataclass(frozen=True)
class StatsWindow:
    """
    Fixed-length lookback window anchored at a reference time.

    ``now`` defaults to the current local time. A naive ``now`` is read as
    local time; both are bucketed against the local calendar.

    Example:
        window = StatsWindow()
        days = window.count_days_since(commit_time)
        offset = days + window.today_offset
    """
    days: int = DAYS_IN_WINDOW
    now: Optional[datetime] = None
    local_clock: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        now = self.now if self.now is not None else datetime.now()
        if now.tzinfo is None:
            object.__setattr__(self, 'local_clock', True)
            now = now.astimezone()
        object.__setattr__(self, 'now', now)

    @classmethod
    def from_config(cls, config: Dict[str, Any], now: Optional[datetime] = None) -> 'StatsWindow':
        """Build a window from the ``general`` config section."""
        days = config.get('general', {}).get('window_days', DAYS_IN_WINDOW)
        if isinstance(days, bool) or not isinstance(days, int) or days < 7:
            raise ConfigError(f"general.window_days must be an integer >= 7, got {days!r}")
        return cls(days=days, now=now)

    @property
    def weeks(self) -> int:
        """Number of whole weeks in the window (26 for 183 days)."""
        return self.days // 7

    @property
    def midnight(self) -> datetime:
        return beginning_of_day(self.now, local=self.local_clock)

    @property
    def start(self) -> datetime:
        """Midnight ``days`` days before today."""
        return self.midnight - self.days * ONE_DAY

    @property
    def today_offset(self) -> int:
        """
        Grid shift for the current weekday.

        Monday is 1 through Saturday 6, and Sunday is 7. No weekday maps to 0.
        """
        return self.now.isoweekday()

    def count_days_since(self, when: datetime) -> int:
        """
        Count whole days between ``when`` and today's midnight.

        Equivalent to stepping ``when`` forward 24 hours at a time until it is
        no longer before midnight, counting the steps. Any timestamp from
        midnight onward is 0 days; past ``days`` steps the result is
        OUT_OF_RANGE.
        """
        if when.tzinfo is None:
            when = when.astimezone()

        midnight = self.midnight
        if when >= midnight:
            return 0

        steps, remainder = divmod(midnight - when, ONE_DAY)
        if remainder:
            steps += 1

        if steps > self.days:
            return OUT_OF_RANGE
        return steps

    def offset_for(self, when: datetime) -> int:
        """
        Grid offset of a commit time, or OUT_OF_RANGE if it falls outside.
        """
        days_since = self.count_days_since(when)
        if days_since == OUT_OF_RANGE:
            return OUT_OF_RANGE

        offset = days_since + self.today_offset
        if offset > self.days - 1:
            return OUT_OF_RANGE
        return offset
