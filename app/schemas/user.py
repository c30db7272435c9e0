from pydantic import BaseModel, EmailStr, Field, StrictFloat, StrictInt


class CreateUserRequest(BaseModel):
    firstName: str = Field(min_length=1)
    lastName: str = Field(min_length=1)
    userName: str = Field(min_length=3)
    password: str | None = None
    contactNo: str | None = None
    emailId: EmailStr | None = None
    address: str | None = None
    userRoleId: StrictInt | StrictFloat
    notes: str | None = None
    employeeNo: str | None = None
    department: str | None = None
    designation: str | None = None
