from .dictionaries import CreateDictionaryRequest, DictionaryResponse
from .serde_base import SerdeBase

__all__ = [
    "CreateDictionaryRequest",
    "DictionaryResponse",
    "SerdeBase",
]
