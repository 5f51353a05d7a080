import json

from django.test import SimpleTestCase, RequestFactory

from .errors import format_validation_errors
from .views import server_error, service_status


class FormatValidationErrorsTest(SimpleTestCase):

    def test_names_the_field(self):
        message = format_validation_errors([
            {"loc": ("body", "payload", "title"), "msg": "Field required"},
            {"loc": ("body", "payload", "isCompleted"), "msg": "Input should be a valid boolean"},
        ])
        self.assertEqual(
            message,
            "Invalid request: title: Field required; isCompleted: Input should be a valid boolean",
        )

    def test_error_without_field(self):
        message = format_validation_errors([{"loc": ("body", "payload"), "msg": "Field required"}])
        self.assertEqual(message, "Invalid request: Field required")

    def test_no_errors(self):
        self.assertEqual(format_validation_errors([]), "Invalid request")


class CoreViewsTest(SimpleTestCase):

    def setUp(self):
        self.factory = RequestFactory()

    def test_server_error_is_json(self):
        response = server_error(self.factory.get('/boom'))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {"error": "Internal server error"})

    def test_service_status(self):
        response = service_status(self.factory.get('/'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content)["status"], "running")


class SettingsTest(SimpleTestCase):

    def test_no_database_backed_apps(self):
        from django.conf import settings
        self.assertNotIn('django.contrib.auth', settings.INSTALLED_APPS)
        self.assertNotIn('django.contrib.contenttypes', settings.INSTALLED_APPS)
