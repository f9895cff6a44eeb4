"""Tests for response interpretation."""

import pytest

from girocheckout_sdk.exceptions import ParseError
from girocheckout_sdk.responses import Outcome, interpret_response, result_code_from


class TestInterpretResponse:
    """Tests for interpret_response."""

    def test_success(self):
        outcome = interpret_response('{"rc":0,"message":"OK","reference":"abc"}')
        assert outcome.success is True
        assert outcome.message == "OK"
        assert outcome.authorization == "abc"
        assert outcome.reference == "abc"

    def test_business_failure_is_not_an_error(self):
        outcome = interpret_response('{"rc":1,"message":"declined"}')
        assert outcome.success is False
        assert outcome.message == "declined"
        assert outcome.authorization is None

    def test_params_pass_through(self):
        outcome = interpret_response('{"rc":0,"reference":"abc","extra":{"x":1}}')
        assert outcome.params == {"rc": 0, "reference": "abc", "extra": {"x": 1}}

    def test_redirect(self):
        outcome = interpret_response(
            '{"rc":0,"reference":"abc","redirect":"https://pay.example/abc"}'
        )
        assert outcome.redirect == "https://pay.example/abc"

    def test_redirect_absent(self):
        assert interpret_response('{"rc":0}').redirect is None

    def test_string_rc_zero_is_success(self):
        assert interpret_response('{"rc":"0"}').success is True

    @pytest.mark.parametrize("body", ['{"rc":0.0}', '{"rc":-0.0}', '{"rc":0}'])
    def test_integral_zero_rc_is_success(self, body):
        assert interpret_response(body).success is True

    @pytest.mark.parametrize("body", ['{"rc":0.5}', '{"rc":4900.0}'])
    def test_other_float_rc_fails(self, body):
        assert interpret_response(body).success is False

    def test_structured_message_passes_through(self):
        outcome = interpret_response('{"rc":1,"message":["invalid amount","invalid currency"]}')
        assert outcome.success is False
        assert outcome.message == ["invalid amount", "invalid currency"]

    def test_structured_reference_passes_through(self):
        outcome = interpret_response('{"rc":0,"reference":{"id":"x"}}')
        assert outcome.success is True
        assert outcome.authorization == {"id": "x"}

    @pytest.mark.parametrize("body", [
        '{"message":"no rc"}',
        '{"rc":"abc"}',
        '{"rc":null}',
        '{"rc":false}',
        '{"rc":"5000"}',
        '{"rc":5000}',
    ])
    def test_non_zero_missing_or_non_numeric_rc_fails(self, body):
        assert interpret_response(body).success is False

    def test_test_flag(self):
        assert interpret_response('{"rc":0}', test=True).test is True
        assert interpret_response('{"rc":0}').test is False

    @pytest.mark.parametrize("body", ["", "not json", "<html></html>", "{", None])
    def test_malformed_body_raises(self, body):
        with pytest.raises(ParseError):
            interpret_response(body)

    @pytest.mark.parametrize("body", ["[]", '"OK"', "0", "null"])
    def test_non_object_raises(self, body):
        with pytest.raises(ParseError):
            interpret_response(body)

    def test_parse_error_keeps_body(self):
        with pytest.raises(ParseError) as exc_info:
            interpret_response("oops")
        assert exc_info.value.body == "oops"


class TestOutcome:

    def test_result_code(self):
        assert interpret_response('{"rc":" 4900 "}').result_code == 4900
        assert result_code_from({}) is None

    def test_numeric_message_is_kept_verbatim(self):
        outcome = Outcome(success=False, message=4900)
        assert outcome.message == 4900

    def test_float_result_code(self):
        assert interpret_response('{"rc":5100.0}').result_code == 5100

    def test_serializes(self):
        outcome = interpret_response('{"rc":0,"message":"OK","reference":"abc"}')
        assert outcome.model_dump() == {
            "success": True,
            "message": "OK",
            "params": {"rc": 0, "message": "OK", "reference": "abc"},
            "authorization": "abc",
            "test": False,
        }
