from pydantic import BaseModel, Field


class VisitorCreate(BaseModel):
    nationalid: str
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    purpose: str | None = None
    hostName: str | None = Field(default=None, serialization_alias="host_name")
    date: str | None = None
    time: str | None = None
    duration: str | None = None
    durationunit: str | None = None
    isApproved: bool = Field(default=False, serialization_alias="is_approved")
    inprogress: bool = False
    complete: bool = False
    exit: bool = False

    def to_fields(self) -> dict:
        return self.model_dump(by_alias=True)


class VisitorUpdate(BaseModel):
    nationalid: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    purpose: str | None = None
    hostName: str | None = Field(default=None, serialization_alias="host_name")
    date: str | None = None
    time: str | None = None
    duration: str | None = None
    durationunit: str | None = None
    isApproved: bool | None = Field(default=None, serialization_alias="is_approved")
    inprogress: bool | None = None
    complete: bool | None = None
    exit: bool | None = None

    def to_fields(self) -> dict:
        # Only what the caller sent; the normalizer fills the always-kept keys.
        return self.model_dump(by_alias=True, exclude_unset=True)


class VisitorStatusUpdate(BaseModel):
    status: str = Field(min_length=1)
