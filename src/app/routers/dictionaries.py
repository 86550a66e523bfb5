from uuid import UUID

from fastapi import APIRouter, Response, status

from app.core import DictionaryController
from app.models.requests import CreateDictionaryRequest, DictionaryResponse
from app.shared import Logger
from app.shared.http import unwrap

logger = Logger(__name__).get_logger()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"description": "Dictionary not found"}}


def build_router(controller: DictionaryController) -> APIRouter:
    router = APIRouter(prefix="/dictionaries", tags=["dictionaries"])

    def create_dictionary(data: CreateDictionaryRequest) -> DictionaryResponse:
        dictionary = controller.create_dictionary(data)
        logger.info("Created dictionary %s", dictionary.id)
        return dictionary

    def get_all_dictionaries() -> list[DictionaryResponse]:
        return controller.get_all_dictionaries()

    def get_dictionary_by_id(id: UUID) -> DictionaryResponse:
        return unwrap(controller.get_dictionary_by_id(id))

    def delete_dictionary(id: UUID) -> Response:
        unwrap(controller.delete_dictionary(id))
        logger.info("Deleted dictionary %s", id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    router.add_api_route(
        "",
        create_dictionary,
        methods=["POST"],
        response_model=DictionaryResponse,
        summary="Create a new dictionary",
        response_description="Dictionary created successfully",
    )
    router.add_api_route(
        "",
        get_all_dictionaries,
        methods=["GET"],
        response_model=list[DictionaryResponse],
        summary="Get all dictionaries",
        response_description="List of dictionaries",
    )
    router.add_api_route(
        "/{id}",
        get_dictionary_by_id,
        methods=["GET"],
        response_model=DictionaryResponse,
        summary="Get dictionary by ID",
        response_description="Dictionary found",
        responses=NOT_FOUND_RESPONSE,
    )
    router.add_api_route(
        "/{id}",
        delete_dictionary,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete dictionary by ID",
        response_description="Dictionary deleted successfully",
        responses=NOT_FOUND_RESPONSE,
    )

    return router
