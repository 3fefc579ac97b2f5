"""
E2E: контактная форма главной страницы.

Запуск: pytest --run-e2e --browser chrome
"""
import pytest

from pages.front_page import FrontPage

pytestmark = pytest.mark.e2e

CONTACT_NAME = "Jane Doe"
CONTACT_EMAIL = "jane@example.com"
CONTACT_PHONE = "1234567890"
CONTACT_SUBJECT = "Inquiry"
CONTACT_DESCRIPTION = "Is breakfast included?"


class TestContactForm:

    def test_front_page_loads(self, front_page: FrontPage):
        assert front_page.is_visible(FrontPage.PAGE_MARKER, timeout=0)

    def test_send_message_shows_success(self, front_page: FrontPage):
        front_page.send_message(CONTACT_NAME, CONTACT_EMAIL, CONTACT_PHONE, CONTACT_SUBJECT, CONTACT_DESCRIPTION)

        front_page.expect_visible(FrontPage.CONTACT_SUCCESS_MESSAGE, "Contact success message shown")
        assert CONTACT_NAME in front_page.text_of(FrontPage.CONTACT_SUCCESS_MESSAGE)
        assert not front_page.is_visible(FrontPage.CONTACT_ERROR_MESSAGES, timeout=0)

    def test_empty_message_shows_validation_errors(self, front_page: FrontPage):
        front_page.send_message("", "", "", "", "")

        front_page.expect_visible(FrontPage.CONTACT_ERROR_MESSAGES, "Contact validation errors shown")
        assert not front_page.is_visible(FrontPage.CONTACT_SUCCESS_MESSAGE, timeout=0)
