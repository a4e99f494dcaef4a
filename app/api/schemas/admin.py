from pydantic import BaseModel, Field


class AddSlotRequest(BaseModel):
    slots: list[str] = Field(default_factory=list)
    candidate: str


class RemoveSlotRequest(BaseModel):
    slots: list[str]
    index: int = Field(ge=0)


class SlotListResponse(BaseModel):
    slots: list[str]


class RegistrationResponse(BaseModel):
    message: str
