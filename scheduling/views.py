import logging
from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied
from django.http import JsonResponse
from django.shortcuts import render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST
from django_ratelimit.decorators import ratelimit

from core.middleware import get_client_ip
from core.utils import ratelimit_key_by_client_ip

from .forms import AppointmentForm, ScheduleRequestForm
from .models import Appointment, ScheduleRequest
from .periods import pretty_time_range_label
from .services.calendar import (
    WEEKDAY_HEADERS,
    admin_day_summary,
    appointments_on,
    build_month_grid,
    client_day_summary,
    month_label,
    parse_day,
    parse_month,
    shift_month,
)
from .services.requests import RequestAlreadyResolved, approve_request, reject_request
from .services.stats import dashboard_stats

logger = logging.getLogger(__name__)

REQUEST_SENT_TITLE = "Solicitação enviada!"
REQUEST_SENT_MESSAGE = "Aguarde a confirmação do administrador."
RATE_LIMITED_MESSAGE = "Muitas solicitações em pouco tempo. Tente novamente mais tarde."


def staff_required(view_func):
    @login_required
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_staff:
            logger.warning(
                "[Scheduling] non-staff access blocked user_id=%s path=%s",
                request.user.id,
                request.path,
            )
            raise PermissionDenied
        return view_func(request, *args, **kwargs)

    return _wrapped


def _request_rate(group, request):
    return settings.SCHEDULING_REQUEST_RATE_LIMIT


def _validation_error_response(form):
    return JsonResponse(
        {
            "status": "error",
            "code": "validation_error",
            "errors": form.errors.get_json_data(),
        },
        status=400,
    )


def _not_found_response(message):
    return JsonResponse(
        {
            "status": "error",
            "code": "not_found",
            "message": message,
        },
        status=404,
    )


def _render_request_form(request, form, error_message=""):
    # 200 so htmx swaps the form back in with its errors
    return render(
        request,
        "scheduling/partials/request_form.html",
        {"form": form, "error_message": error_message},
    )


def _render_event_form(request, form, appointment=None):
    return render(
        request,
        "scheduling/partials/event_form.html",
        {"form": form, "appointment": appointment},
    )


def _with_refresh(request, response):
    # htmx callers reload the page so calendar, day list and panel stay in sync
    if request.htmx:
        response["HX-Refresh"] = "true"
    return response


def _serialize_appointment(appointment):
    return {
        "id": appointment.id,
        "title": appointment.title,
        "professor": appointment.professor,
        "class_group": appointment.class_group,
        "description": appointment.description,
        "date": appointment.local_date.isoformat(),
        "start": appointment.start_hhmm,
        "end": appointment.end_hhmm,
        "start_time": timezone.localtime(appointment.start_time).isoformat(),
        "end_time": timezone.localtime(appointment.end_time).isoformat(),
        "period_label": pretty_time_range_label(appointment.start_hhmm, appointment.end_hhmm),
    }


def _serialize_request(schedule_request):
    return {
        "id": schedule_request.id,
        "date": schedule_request.date.isoformat(),
        "start": schedule_request.start_hhmm,
        "end": schedule_request.end_hhmm,
        "professor": schedule_request.professor,
        "class_group": schedule_request.class_group,
        "description": schedule_request.description,
        "created_at": schedule_request.created_at.isoformat(),
    }


def _calendar_context(request, calendar_url):
    today = timezone.localdate()
    selected = parse_day(request.GET.get("date"), today)
    if request.GET.get("month"):
        anchor = parse_month(request.GET.get("month"), today)
    else:
        anchor = selected.replace(day=1)

    appointments = list(Appointment.objects.all())
    day_appointments = list(appointments_on(selected))
    return {
        "school_name": settings.SCHOOL_NAME,
        "calendar_url": calendar_url,
        "today": today,
        "selected_date": selected,
        "month_anchor": anchor,
        "month_label": month_label(anchor),
        "prev_month": shift_month(anchor, -1),
        "next_month": shift_month(anchor, 1),
        "weekday_headers": WEEKDAY_HEADERS,
        "weeks": build_month_grid(anchor, today=today, selected=selected, appointments=appointments),
        "appointments": appointments,
        "day_appointments": day_appointments,
    }


# Public client view


@require_GET
def client_view(request):
    context = _calendar_context(request, reverse("scheduling:client"))
    context["day_summary"] = client_day_summary(len(context["day_appointments"]))
    context["request_form"] = ScheduleRequestForm(
        initial={"date": context["selected_date"].strftime("%Y-%m-%d"), "start": "09:00", "end": "10:00"}
    )
    if request.htmx:
        return render(request, "scheduling/partials/client_body.html", context)
    return render(request, "scheduling/client.html", context)


@require_GET
def api_events(request):
    events = [_serialize_appointment(a) for a in Appointment.objects.all()]
    return JsonResponse({"status": "success", "events": events})


@require_POST
@ratelimit(key=ratelimit_key_by_client_ip, rate=_request_rate, method="POST", block=False)
def api_create_request(request):
    form = ScheduleRequestForm(request.POST)

    if getattr(request, "limited", False):
        logger.warning("[Scheduling] request submission rate limited ip=%s", get_client_ip(request))
        if request.htmx:
            return _render_request_form(request, form, error_message=RATE_LIMITED_MESSAGE)
        return JsonResponse(
            {
                "status": "error",
                "code": "rate_limited",
                "message": RATE_LIMITED_MESSAGE,
            },
            status=429,
        )

    if not form.is_valid():
        if request.htmx:
            return _render_request_form(request, form)
        return _validation_error_response(form)

    schedule_request = form.build()
    schedule_request.save()
    logger.info(
        "[Scheduling] request submitted request_id=%s date=%s",
        schedule_request.id,
        schedule_request.date,
    )
    if request.htmx:
        # shown by base.html after the HX-Refresh reload
        messages.success(request, f"{REQUEST_SENT_TITLE} {REQUEST_SENT_MESSAGE}")
    return _with_refresh(
        request,
        JsonResponse(
            {
                "status": "success",
                "title": REQUEST_SENT_TITLE,
                "message": REQUEST_SENT_MESSAGE,
                "request": _serialize_request(schedule_request),
            },
            status=201,
        ),
    )


# Admin views


@staff_required
@require_GET
def admin_panel(request):
    context = _calendar_context(request, reverse("scheduling:admin_panel"))
    context["stats"] = dashboard_stats(context["appointments"], context["today"])
    context["requests"] = ScheduleRequest.objects.all()
    context["day_summary"] = admin_day_summary(len(context["day_appointments"]), context["selected_date"])
    context["event_form"] = AppointmentForm(
        initial={"date": context["selected_date"].strftime("%Y-%m-%d"), "start": "09:00", "end": "10:00"}
    )
    if request.htmx:
        return render(request, "scheduling/partials/calendar.html", context)
    return render(request, "scheduling/admin_panel.html", context)


@staff_required
@require_GET
def admin_day_events(request):
    selected = parse_day(request.GET.get("date"), timezone.localdate())
    day_appointments = list(appointments_on(selected))
    return render(
        request,
        "scheduling/partials/day_events.html",
        {
            "selected_date": selected,
            "day_appointments": day_appointments,
            "day_summary": admin_day_summary(len(day_appointments), selected),
            "is_admin": True,
        },
    )


@staff_required
@require_GET
def requests_panel(request):
    return render(
        request,
        "scheduling/partials/requests_panel.html",
        {"requests": ScheduleRequest.objects.all()},
    )


@staff_required
@require_GET
def api_requests(request):
    items = [_serialize_request(r) for r in ScheduleRequest.objects.all()]
    return JsonResponse({"status": "success", "requests": items})


@staff_required
@require_GET
def api_event_detail(request, event_id):
    appointment = Appointment.objects.filter(id=event_id).first()
    if appointment is None:
        return _not_found_response("Agendamento não encontrado.")
    if request.htmx:
        form = AppointmentForm(initial=AppointmentForm.initial_for(appointment))
        return _render_event_form(request, form, appointment)
    return JsonResponse(
        {
            "status": "success",
            "event": _serialize_appointment(appointment),
            "form": AppointmentForm.initial_for(appointment),
        }
    )


@staff_required
@require_POST
def api_create_event(request):
    form = AppointmentForm(request.POST)
    if not form.is_valid():
        if request.htmx:
            return _render_event_form(request, form)
        return _validation_error_response(form)

    appointment = form.build()
    appointment.save()
    logger.info("[Scheduling] appointment created id=%s user_id=%s", appointment.id, request.user.id)
    messages.success(request, "Agendamento criado.")
    return _with_refresh(
        request,
        JsonResponse({"status": "success", "event": _serialize_appointment(appointment)}, status=201),
    )


@staff_required
@require_POST
def api_update_event(request, event_id):
    appointment = Appointment.objects.filter(id=event_id).first()
    if appointment is None:
        return _not_found_response("Agendamento não encontrado.")

    form = AppointmentForm(request.POST)
    if not form.is_valid():
        if request.htmx:
            return _render_event_form(request, form, appointment)
        return _validation_error_response(form)

    form.apply_to(appointment)
    appointment.save()
    logger.info("[Scheduling] appointment updated id=%s user_id=%s", appointment.id, request.user.id)
    messages.success(request, "Agendamento atualizado.")
    return _with_refresh(
        request,
        JsonResponse({"status": "success", "event": _serialize_appointment(appointment)}),
    )


@staff_required
@require_POST
def api_delete_event(request, event_id):
    appointment = Appointment.objects.filter(id=event_id).first()
    if appointment is None:
        return _not_found_response("Agendamento não encontrado.")
    appointment.delete()
    logger.info("[Scheduling] appointment deleted id=%s user_id=%s", event_id, request.user.id)
    messages.success(request, "Agendamento excluído.")
    return _with_refresh(request, JsonResponse({"status": "success", "deleted_id": event_id}))


@staff_required
@require_POST
def api_approve_request(request, request_id):
    try:
        appointment = approve_request(request_id)
    except RequestAlreadyResolved as exc:
        return _not_found_response(str(exc))
    messages.success(request, "Solicitação aprovada.")
    return _with_refresh(
        request,
        JsonResponse({"status": "success", "event": _serialize_appointment(appointment)}),
    )


@staff_required
@require_POST
def api_reject_request(request, request_id):
    try:
        reject_request(request_id)
    except RequestAlreadyResolved as exc:
        return _not_found_response(str(exc))
    messages.info(request, "Solicitação rejeitada.")
    return _with_refresh(request, JsonResponse({"status": "success", "deleted_id": request_id}))
