from uuid import UUID

from app.core.dictionary_service import DictionaryService
from app.core.result import NotFound, Ok, Result
from app.models.requests import CreateDictionaryRequest, DictionaryResponse
from app.shared import Logger

logger = Logger(__name__).get_logger()


class DictionaryController:
    """Maps dictionary DTOs onto service calls.

    Lookups and deletes return ``Ok`` or ``NotFound`` instead of raising;
    turning those into HTTP statuses is left to the router.
    """

    def __init__(self, service: DictionaryService):
        self.__service = service

    def create_dictionary(self, data: CreateDictionaryRequest) -> DictionaryResponse:
        logger.debug("Creating dictionary with code: %s", data.code)
        dictionary = self.__service.create(data.code, data.description)
        return DictionaryResponse.from_record(dictionary)

    def get_all_dictionaries(self) -> list[DictionaryResponse]:
        return [
            DictionaryResponse.from_record(dictionary)
            for dictionary in self.__service.list_all()
        ]

    def get_dictionary_by_id(self, id: UUID) -> Result[DictionaryResponse]:
        dictionary = self.__service.get_by_id(id)
        if dictionary is None:
            logger.warning("Dictionary not found: %s", id)
            return NotFound(id)

        return Ok(DictionaryResponse.from_record(dictionary))

    def delete_dictionary(self, id: UUID) -> Result[None]:
        if self.__service.get_by_id(id) is None:
            logger.warning("Cannot delete missing dictionary: %s", id)
            return NotFound(id)

        self.__service.delete_by_id(id)
        return Ok(None)
