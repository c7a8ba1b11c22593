from django.test import RequestFactory, TestCase, override_settings

from core.adapters import ClosedSignupAccountAdapter
from core.context_processors import school


class ClosedSignupAdapterTest(TestCase):
    def test_signup_is_closed(self):
        request = RequestFactory().get('/accounts/signup/')
        self.assertFalse(ClosedSignupAccountAdapter(request).is_open_for_signup(request))


class SchoolContextProcessorTest(TestCase):
    @override_settings(SCHOOL_NAME='Escola Teste')
    def test_school_name_in_context(self):
        request = RequestFactory().get('/')
        self.assertEqual(school(request), {'school_name': 'Escola Teste'})
