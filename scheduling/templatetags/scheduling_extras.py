from django import template

from scheduling.periods import pretty_time_range_label

register = template.Library()


@register.filter
def period_label(item):
    """
    Subtitle for an appointment or request: "1ª–2ª aulas — 07:25 – 09:05".
    Usage: {{ appointment|period_label }}
    """
    start = getattr(item, "start_hhmm", None)
    end = getattr(item, "end_hhmm", None)
    if not start or not end:
        return "--:-- – --:--"
    return pretty_time_range_label(start, end)
