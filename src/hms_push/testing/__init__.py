"""Testing – in-memory doubles for the transport port."""
from hms_push.testing.fakes import FakeTransport, json_response, push_response, token_response

__all__ = ["FakeTransport", "json_response", "push_response", "token_response"]
