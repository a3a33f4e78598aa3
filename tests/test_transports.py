import json
import smtplib

import httpx
import pytest

from motel.utils.email import EmailConfig, EmailError, SmtpMailer
from motel.utils.formatters import format_money
from motel.utils.sms import SMSConfig, SMSDeliveryError, SmsGatewaySender


def _gateway(handler, api_key="key-123"):
    config = SMSConfig(enabled=True, api_url="https://sms.example.test/send", api_key=api_key)
    return SmsGatewaySender(config, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_format_money_groups_thousands():
    assert format_money(1500000, "VND") == "1,500,000 VND"
    assert format_money(None, "VND") == "0 VND"


def test_sms_skipped_when_gateway_disabled():
    sender = SmsGatewaySender(SMSConfig(enabled=False, api_url="https://sms.example.test"))

    result = sender.send("0900", "hello")

    assert result.success and result.skipped


def test_sms_posts_json_with_bearer_key():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200)

    result = _gateway(handler).send(" 0900 ", "Pay please")

    assert result.success and not result.skipped
    assert seen["auth"] == "Bearer key-123"
    assert seen["body"] == {"phone": "0900", "message": "Pay please"}


def test_sms_non_2xx_raises_delivery_error():
    sender = _gateway(lambda request: httpx.Response(503))

    with pytest.raises(SMSDeliveryError, match="503"):
        sender.send("0900", "hello")


def test_sms_connection_failure_raises_delivery_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(SMSDeliveryError):
        _gateway(handler).send("0900", "hello")


def test_mailer_without_host_sends_nothing():
    mailer = SmtpMailer(EmailConfig(smtp_host=None, smtp_port=25, username=None, password=None))
    assert mailer.send("a@example.com", "Subject", "Body") is False


def test_mailer_wraps_smtp_failures(monkeypatch):
    def refuse(*args, **kwargs):
        raise smtplib.SMTPConnectError(421, "busy")

    monkeypatch.setattr(smtplib, "SMTP", refuse)
    mailer = SmtpMailer(EmailConfig(smtp_host="smtp.example.test", smtp_port=587, username=None, password=None))

    with pytest.raises(EmailError):
        mailer.send("a@example.com", "Subject", "Body")
