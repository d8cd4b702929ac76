from enum import Enum

# The analytics backend has no "all time" query; a very large window stands in for it.
ALL_TIME_HOURS = 999999


class TimeRange(str, Enum):
    """Selectable windows for the admin analytics dashboard."""

    HOUR = "1"
    SIX_HOURS = "6"
    TWELVE_HOURS = "12"
    DAY = "24"
    WEEK = "168"
    ALL = "all"

    @property
    def hours(self) -> int:
        if self is TimeRange.ALL:
            return ALL_TIME_HOURS
        return int(self.value)

    @property
    def description(self) -> str:
        if self is TimeRange.ALL:
            return "Alle Daten seit Serverstart"
        if self is TimeRange.WEEK:
            return "Echtzeit-Daten der letzten 7 Tage"
        return f"Echtzeit-Daten der letzten {self.value} Stunden"
