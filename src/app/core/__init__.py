from .dictionary_controller import DictionaryController
from .dictionary_service import DictionaryService
from .result import NotFound, Ok, Result

__all__ = ["DictionaryController", "DictionaryService", "NotFound", "Ok", "Result"]
