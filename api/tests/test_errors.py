import httpx

from neouptime.notifications.errors import NotificationError, translate_transport_error


def _status_error(response: httpx.Response) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://outlook.webhook.office.com/webhookb2/abc")
    response.request = request
    return httpx.HTTPStatusError("Client error '400 Bad Request'", request=request, response=response)


def test_translate_plain_transport_error():
    err = translate_transport_error(httpx.ReadTimeout("timed out"))
    assert isinstance(err, NotificationError)
    assert str(err) == "Error: timed out "
    assert err.status_code is None


def test_translate_appends_text_body():
    err = translate_transport_error(_status_error(httpx.Response(400, text="Summary or Text is required.")))
    assert str(err) == "Error: Client error '400 Bad Request' Summary or Text is required."
    assert err.status_code == 400


def test_translate_serializes_json_body():
    err = translate_transport_error(_status_error(httpx.Response(403, json={"error": "forbidden"})))
    assert str(err) == 'Error: Client error \'400 Bad Request\' {"error":"forbidden"}'
    assert err.status_code == 403


def test_translate_empty_body():
    err = translate_transport_error(_status_error(httpx.Response(502)))
    assert str(err) == "Error: Client error '400 Bad Request' "
    assert err.status_code == 502


def test_translate_keeps_empty_json_object():
    err = translate_transport_error(_status_error(httpx.Response(400, json={})))
    assert str(err) == "Error: Client error '400 Bad Request' {}"


def test_translate_keeps_empty_json_array():
    err = translate_transport_error(_status_error(httpx.Response(400, json=[])))
    assert str(err) == "Error: Client error '400 Bad Request' []"


def test_translate_nested_json_body_is_compact():
    body = {"error": {"code": "BadRequest", "details": ["Summary", "Text"]}}
    err = translate_transport_error(_status_error(httpx.Response(400, json=body)))
    assert str(err).endswith('{"error":{"code":"BadRequest","details":["Summary","Text"]}}')
