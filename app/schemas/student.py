from pydantic import BaseModel, ConfigDict, Field, field_validator


class StudentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=150)

    @field_validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Student name cannot be empty')
        return v.strip()

class StudentCreate(StudentBase):
    # An "id" sent by the client is dropped; the service assigns it
    model_config = ConfigDict(extra="ignore")

class StudentUpdate(StudentBase):
    model_config = ConfigDict(extra="ignore")

class Student(BaseModel):
    id: int
    name: str
    age: int

    model_config = ConfigDict(from_attributes=True)
