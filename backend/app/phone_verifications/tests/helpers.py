import json
from unittest.mock import MagicMock

TWILIO_SETTINGS = {
    "TWILIO_ACCOUNT_SID": "ACtest",
    "TWILIO_AUTH_TOKEN": "secret",
    "TWILIO_WHATSAPP_NUMBER": "+12465550000",
    "TWILIO_TEMPLATE_SID": "HXtemplate",
    "OTP_SEND_LIMIT": 0,
}


def twilio_response(status_code=201, sid="SM123", text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    resp.json.return_value = {"sid": sid}
    return resp


def sent_code(mock_post) -> str:
    data = mock_post.call_args.kwargs["data"]
    return json.loads(data["ContentVariables"])["1"]
