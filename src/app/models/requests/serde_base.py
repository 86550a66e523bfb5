from pydantic import BaseModel, ConfigDict


class SerdeBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)
