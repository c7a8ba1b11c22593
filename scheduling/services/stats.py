from collections import Counter

from django.utils import timezone

from scheduling.services.calendar import month_label

NO_SLOT = "—"


def dashboard_stats(appointments, today):
    """KPI numbers shown on top of the admin calendar."""
    valid = [a for a in appointments if a.start_time is not None and a.end_time is not None]

    total_month = 0
    slot_counts = Counter()
    for appointment in valid:
        start_local = timezone.localtime(appointment.start_time)
        end_local = timezone.localtime(appointment.end_time)
        if (start_local.year, start_local.month) == (today.year, today.month):
            total_month += 1
        slot_counts[f"{start_local:%H:%M}–{end_local:%H:%M}"] += 1

    top_slot = NO_SLOT
    best = -1
    # first slot to reach the maximum wins
    for slot, count in slot_counts.items():
        if count > best:
            best = count
            top_slot = slot

    return {
        "total_all": len(valid),
        "total_month": total_month,
        "top_slot": top_slot,
        "month_label": month_label(today),
    }
