from uuid import UUID

from app.models.schema import Dictionary

from .serde_base import SerdeBase


class CreateDictionaryRequest(SerdeBase):
    code: str
    description: str


class DictionaryResponse(SerdeBase):
    id: UUID
    code: str
    description: str

    @classmethod
    def from_record(cls, record: Dictionary) -> "DictionaryResponse":
        return cls(id=record.id, code=record.code, description=record.description)
