"""Business logic services"""

from .mime import Base64LineBreaker, EmlImporter, ImportResult, encode_base64_body, eml_to_message

__all__ = [
    "Base64LineBreaker",
    "EmlImporter",
    "ImportResult",
    "encode_base64_body",
    "eml_to_message",
]
