from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Dictionary(SQLModel, table=True):
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique record identifier, assigned once at creation",
    )
    code: str = Field(..., index=True, description="Short code supplied by the caller")
    description: str = Field(..., description="Free-text description of the code")
