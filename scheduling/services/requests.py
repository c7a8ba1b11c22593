import logging

from django.db import transaction

from scheduling.forms import combine_local
from scheduling.models import Appointment, ScheduleRequest

logger = logging.getLogger(__name__)


class RequestAlreadyResolved(Exception):
    pass


def approve_request(request_id):
    """
    Turn a pending request into an appointment.

    The appointment is created and the request deleted in one transaction,
    with the request row locked so two admins cannot approve it twice.
    """
    with transaction.atomic():
        schedule_request = ScheduleRequest.objects.select_for_update().filter(pk=request_id).first()
        if schedule_request is None:
            raise RequestAlreadyResolved("Solicitação já foi processada.")

        appointment = Appointment.objects.create(
            professor=schedule_request.professor,
            class_group=schedule_request.class_group,
            description=schedule_request.description or "",
            start_time=combine_local(schedule_request.date, schedule_request.start),
            end_time=combine_local(schedule_request.date, schedule_request.end),
        )
        schedule_request.delete()

    logger.info(
        "[Scheduling] request approved request_id=%s appointment_id=%s",
        request_id,
        appointment.id,
    )
    return appointment


def reject_request(request_id):
    deleted, _ = ScheduleRequest.objects.filter(pk=request_id).delete()
    if not deleted:
        raise RequestAlreadyResolved("Solicitação já foi processada.")
    logger.info("[Scheduling] request rejected request_id=%s", request_id)
