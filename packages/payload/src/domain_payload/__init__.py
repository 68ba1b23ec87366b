"""Result payloads handed from a domain layer to a presentation layer.

Exposes the Payload value object, its well-known status tokens, and a
factory for call sites that should not construct payloads directly.
"""

from domain_payload.factory import PayloadFactory
from domain_payload.payload import Payload, PayloadInterface
from domain_payload.status import PayloadStatus, is_known_status

__all__ = [
    "Payload",
    "PayloadFactory",
    "PayloadInterface",
    "PayloadStatus",
    "is_known_status",
]
