import io
import json
from decimal import Decimal
from unittest import mock
from urllib.error import HTTPError

from django.test import TestCase, override_settings

from orders.models import Order
from orders.services import resend
from orders.services.exceptions import NotificationError
from orders.services.notifications import build_subject, format_total, notify_operator

RESEND_ON = {"RESEND": {"API_KEY": "re_test", "FROM": "Toyshop <orders@example.com>"}}


def _order(**overrides):
    fields = {
        "id": "order-1700000000000-abc123",
        "buyer_name": "Alex",
        "buyer_contact": "alex@example.com",
        "items": [
            {"toyId": "star-bear", "toyName": "Star Bear", "colors": ["Pink"]},
            {"toyId": "axolotl", "toyName": "Axolotl", "colors": ["Mint", "White"]},
        ],
        "total": Decimal("12.50"),
        "notes": "Birthday on Friday",
    }
    fields.update(overrides)
    return Order.objects.create(**fields)


def _response(payload):
    response = mock.MagicMock()
    response.read.return_value = json.dumps(payload).encode("utf-8")
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


class NotificationContentTests(TestCase):
    def test_format_total(self):
        self.assertEqual(format_total(Decimal("5.00")), "$5")
        self.assertEqual(format_total(Decimal("12.5")), "$12.50")
        self.assertEqual(format_total(None), "$0")

    def test_subject_pluralizes(self):
        self.assertEqual(build_subject(_order()), "New Order: 2 toys ($12.50)")

    @override_settings(NOTIFICATIONS=RESEND_ON)
    def test_bodies_list_items_and_contact(self):
        order = _order()

        with mock.patch("orders.services.resend.send_email", return_value="msg_1") as send:
            self.assertTrue(notify_operator(order))

        kwargs = send.call_args.kwargs
        self.assertIn("Star Bear", kwargs["html"])
        self.assertIn("Mint, White", kwargs["html"])
        self.assertIn("Birthday on Friday", kwargs["text"])
        self.assertIn("mailto:alex@example.com", kwargs["text"])

    @override_settings(NOTIFICATIONS=RESEND_ON)
    def test_phone_contact_gets_sms_reply_and_no_reply_to(self):
        order = _order(buyer_contact="555-0101")

        with mock.patch("orders.services.resend.send_email", return_value="msg_1") as send:
            notify_operator(order)

        kwargs = send.call_args.kwargs
        self.assertEqual(kwargs["reply_to"], "")
        self.assertIn("sms:555-0101", kwargs["text"])

    @override_settings(NOTIFICATIONS=RESEND_ON, OPERATOR_EMAIL="")
    def test_missing_operator_email_skips_send(self):
        with mock.patch("orders.services.resend.send_email") as send:
            self.assertFalse(notify_operator(_order()))

        send.assert_not_called()


@override_settings(NOTIFICATIONS=RESEND_ON)
class ResendClientTests(TestCase):
    """
    GUARANTEES:
    - Requests carry the bearer key and JSON payload
    - Provider errors surface as NotificationError
    """

    def test_send_email_posts_payload(self):
        with mock.patch(
            "orders.services.resend.urlopen", return_value=_response({"id": "msg_42"})
        ) as urlopen:
            message_id = resend.send_email(
                to="operator@example.com",
                subject="Hi",
                html="<p>Hi</p>",
                reply_to="alex@example.com",
            )

        self.assertEqual(message_id, "msg_42")
        request = urlopen.call_args[0][0]
        self.assertEqual(request.full_url, "https://api.resend.com/emails")
        self.assertEqual(request.get_header("Authorization"), "Bearer re_test")
        body = json.loads(request.data.decode("utf-8"))
        self.assertEqual(body["to"], ["operator@example.com"])
        self.assertEqual(body["from"], "Toyshop <orders@example.com>")
        self.assertEqual(body["reply_to"], "alex@example.com")
        self.assertNotIn("text", body)

    def test_http_error_raises_notification_error(self):
        error = HTTPError(
            url="https://api.resend.com/emails",
            code=422,
            msg="Unprocessable",
            hdrs=None,
            fp=io.BytesIO(b'{"message": "Invalid from address"}'),
        )
        with mock.patch("orders.services.resend.urlopen", side_effect=error):
            with self.assertRaisesMessage(NotificationError, "Invalid from address"):
                resend.send_email(to="a@example.com", subject="s", html="h")

    @override_settings(NOTIFICATIONS={"RESEND": {"API_KEY": ""}})
    def test_unconfigured_client_refuses_to_send(self):
        self.assertFalse(resend.is_configured())
        with self.assertRaises(NotificationError):
            resend.send_email(to="a@example.com", subject="s", html="h")
