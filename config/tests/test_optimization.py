from django.test import SimpleTestCase


class FrontendOptimizationTest(SimpleTestCase):
    def test_production_static_compression(self):
        from config import settings_production

        backend = settings_production.STORAGES['staticfiles']['BACKEND']
        self.assertEqual(
            backend,
            'whitenoise.storage.CompressedManifestStaticFilesStorage',
            "WhiteNoise compressed manifest storage is not configured.",
        )

    def test_production_security_headers(self):
        from config import settings_production

        if not settings_production.DEBUG:
            self.assertTrue(settings_production.SECURE_CONTENT_TYPE_NOSNIFF)
            self.assertTrue(settings_production.SESSION_COOKIE_SECURE)
            self.assertEqual(settings_production.X_FRAME_OPTIONS, 'DENY')
