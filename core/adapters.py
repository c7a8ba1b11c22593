from allauth.account.adapter import DefaultAccountAdapter


class ClosedSignupAccountAdapter(DefaultAccountAdapter):
    """Administrators are created with `createsuperuser`; public sign-up stays closed."""

    def is_open_for_signup(self, request):
        return False
