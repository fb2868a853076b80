from .fake_transport import FakeTransport, json_response

__all__ = [
    "FakeTransport",
    "json_response",
]
