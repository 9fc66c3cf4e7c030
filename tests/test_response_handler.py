"""Tests for response normalization and the exactly-once completion."""

import pytest
import requests

from conftest import FakeResponse, sent_request
from signnow_client.client.common import (
    Continuation,
    HttpError,
    ParseError,
    TransportError,
    error_handler,
    response_handler,
)
from signnow_client.models import RequestIntent


class TestResponseHandler:
    def test_success_payload(self, recorder):
        response_handler(recorder)(FakeResponse(200, {"id": "abc"}))
        assert recorder.calls == [(None, {"id": "abc"})]

    def test_chunks_joined_in_order(self, recorder):
        chunks = [b'{"na', b'me": "sig', b'n\xc3\xa9"}']
        response_handler(recorder)(FakeResponse(201, chunks=chunks))
        assert recorder.calls == [(None, {"name": "signé"})]

    def test_http_error_keeps_parsed_body(self, recorder):
        response_handler(recorder)(FakeResponse(404, {"error": "not_found"}))
        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert result is None
        assert isinstance(error, HttpError)
        assert error.status_code == 404
        assert error.message == {"error": "not_found"}

    def test_http_error_with_text_body(self, recorder):
        response_handler(recorder)(FakeResponse(502, b"Bad Gateway"))
        error, _ = recorder.calls[0]
        assert isinstance(error, HttpError)
        assert error.status_code == 502
        assert error.message == "Bad Gateway"
        assert str(error) == "502: Bad Gateway"

    def test_malformed_success_body(self, recorder):
        response_handler(recorder)(FakeResponse(200, b"<html>oops"))
        error, result = recorder.calls[0]
        assert isinstance(error, ParseError)
        assert error.status_code == 200
        assert error.raw == "<html>oops"
        assert result is None

    def test_empty_success_body_is_parse_error(self, recorder):
        response_handler(recorder)(FakeResponse(200, chunks=[]))
        assert isinstance(recorder.calls[0][0], ParseError)


class TestErrorHandler:
    def test_transport_error_has_no_status(self, recorder):
        error_handler(recorder)(requests.ConnectionError("Name or service not known"))
        error, result = recorder.calls[0]
        assert isinstance(error, TransportError)
        assert error.status_code is None
        assert error.message == "Name or service not known"
        assert result is None


class TestExactlyOnce:
    def test_shared_continuation_fires_once(self, recorder):
        continuation = Continuation(recorder)
        on_response = response_handler(continuation)
        on_error = error_handler(continuation)
        on_error(requests.ConnectionError("reset"))
        on_response(FakeResponse(200, {"id": "abc"}))
        assert len(recorder.calls) == 1
        assert isinstance(recorder.calls[0][0], TransportError)

    def test_wrapping_twice_reuses_guard(self, recorder):
        continuation = Continuation.of(recorder)
        assert Continuation.of(continuation) is continuation
        continuation(None, 1)
        continuation(None, 2)
        assert recorder.calls == [(None, 1)]


class TestDispatch:
    def test_success(self, client, session, recorder):
        session.request.return_value = FakeResponse(200, {"id": "abc"})
        client.dispatch(RequestIntent(method="GET", path="/user"), recorder)
        assert recorder.calls == [(None, {"id": "abc"})]
        method, url, kwargs = sent_request(session)
        assert (method, url) == ("GET", "https://api.signnow.com/user")
        assert kwargs["stream"] is True
        assert kwargs["timeout"] is None

    def test_dns_failure_fires_once(self, client, session, recorder):
        session.request.side_effect = requests.ConnectionError("DNS resolution failed")
        client.dispatch(RequestIntent(method="GET", path="/user"), recorder)
        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert isinstance(error, TransportError)
        assert error.status_code is None
        assert result is None

    def test_failure_while_streaming_fires_once(self, client, session, recorder):
        response = FakeResponse(200, chunks=[b'{"id"'], error=requests.exceptions.ChunkedEncodingError("reset"))
        session.request.return_value = response
        client.dispatch(RequestIntent(method="GET", path="/user"), recorder)
        assert len(recorder.calls) == 1
        assert isinstance(recorder.calls[0][0], TransportError)
        assert response.closed

    def test_not_found(self, client, session, recorder):
        session.request.return_value = FakeResponse(404, {"error": "not_found"})
        client.dispatch(RequestIntent(method="GET", path="/user"), recorder)
        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert error.status_code == 404
        assert error.message == {"error": "not_found"}
        assert result is None

    def test_callback_exception_propagates(self, client, session):
        session.request.return_value = FakeResponse(200, {"id": "abc"})
        calls = []

        def callback(error, result):
            calls.append((error, result))
            raise requests.ConnectionError("raised inside callback")

        with pytest.raises(requests.ConnectionError, match="raised inside callback"):
            client.dispatch(RequestIntent(method="GET", path="/user"), callback)
        assert calls == [(None, {"id": "abc"})]
