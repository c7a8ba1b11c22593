from django.conf import settings


def school(request):
    """School name for the page header and <title>."""
    return {'school_name': settings.SCHOOL_NAME}
