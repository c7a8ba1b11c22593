"""
Timetable of the school day and helpers that turn a clock-time range into
a friendly period label ("1ª aula", "1ª–3ª aulas", "3ª aula + Intervalo").
"""
from dataclasses import dataclass

KIND_CLASS = "class"
KIND_BREAK = "break"


@dataclass(frozen=True)
class Period:
    label: str
    start: str  # "HH:mm"
    end: str  # "HH:mm"
    kind: str


PERIODS = (
    # morning
    Period("1ª aula", "07:25", "08:15", KIND_CLASS),
    Period("2ª aula", "08:15", "09:05", KIND_CLASS),
    Period("3ª aula", "09:05", "09:55", KIND_CLASS),
    Period("Intervalo", "09:55", "10:25", KIND_BREAK),
    Period("4ª aula", "10:25", "11:15", KIND_CLASS),
    Period("5ª aula", "11:15", "12:05", KIND_CLASS),
    Period("6ª aula", "12:05", "12:55", KIND_CLASS),
    # afternoon
    Period("1ª aula", "13:30", "14:15", KIND_CLASS),
    Period("2ª aula", "14:15", "15:00", KIND_CLASS),
    Period("3ª aula", "15:00", "15:45", KIND_CLASS),
    Period("Intervalo", "15:45", "16:15", KIND_BREAK),
    Period("4ª aula", "16:15", "17:00", KIND_CLASS),
    Period("5ª aula", "17:00", "17:45", KIND_CLASS),
    Period("6ª aula", "17:45", "18:30", KIND_CLASS),
)

_START_INDEX = {period.start: index for index, period in enumerate(PERIODS)}

CLASS_SUFFIX = " aula"


def resolve_range(start, end):
    """
    Map ``start``-``end`` onto a contiguous run of periods.

    Returns a tuple of periods whose first start is ``start`` and whose last
    end is ``end``, or None when the range does not line up with the
    timetable (unknown start, ends mid-period, or crosses a gap).
    """
    index = _START_INDEX.get(start)
    if index is None:
        return None

    run = []
    while index < len(PERIODS):
        period = PERIODS[index]
        run.append(period)
        if period.end == end:
            return tuple(run)
        if index + 1 >= len(PERIODS) or PERIODS[index + 1].start != period.end:
            return None
        index += 1
    return None


def friendly_label(periods):
    if not periods:
        return ""
    if len(periods) == 1:
        return periods[0].label

    if all(period.kind == KIND_CLASS for period in periods):
        first = periods[0].label.replace(CLASS_SUFFIX, "")
        last = periods[-1].label.replace(CLASS_SUFFIX, "")
        return f"{first}–{last} aulas"

    return " + ".join(period.label for period in periods)


def pretty_time_range_label(start, end):
    """'1ª aula — 07:25 – 08:15', or just '07:25 – 08:15' when nothing matches."""
    run = resolve_range(start, end)
    if not run:
        return f"{start} – {end}"
    return f"{friendly_label(run)} — {start} – {end}"
