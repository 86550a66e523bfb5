from uuid import UUID

from sqlalchemy import Engine
from sqlmodel import Session, select

from app.models.schema import Dictionary
from app.shared import Logger

logger = Logger(__name__).get_logger()


class DictionaryService:
    """Storage operations for dictionary records.

    Every call opens and closes its own session on the engine it was built
    with. Returned records are detached but fully loaded.
    """

    def __init__(self, engine: Engine):
        self.__engine = engine

    def create(self, code: str, description: str) -> Dictionary:
        with Session(self.__engine) as session:
            dictionary = Dictionary(code=code, description=description)
            session.add(dictionary)
            session.commit()
            session.refresh(dictionary)

        logger.info("Stored dictionary %s (code: %s)", dictionary.id, code)
        return dictionary

    def list_all(self) -> list[Dictionary]:
        with Session(self.__engine) as session:
            dictionaries = session.exec(
                select(Dictionary).order_by(Dictionary.code, Dictionary.id)
            ).all()

        logger.debug("Loaded %d dictionaries", len(dictionaries))
        return list(dictionaries)

    def get_by_id(self, id: UUID) -> Dictionary | None:
        with Session(self.__engine) as session:
            return session.get(Dictionary, id)

    def delete_by_id(self, id: UUID) -> None:
        with Session(self.__engine) as session:
            dictionary = session.get(Dictionary, id)
            if dictionary is None:
                logger.debug("Nothing to delete for dictionary %s", id)
                return

            session.delete(dictionary)
            session.commit()

        logger.info("Deleted dictionary %s", id)
