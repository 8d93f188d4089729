from pydantic import BaseModel


# -------------------
# User Schemas
# -------------------
class UserResponse(BaseModel):
    # ordem dos campos = ordem das chaves no JSON
    id: int
    name: str
    age: int

    class Config:
        from_attributes = True  # pydantic v2 (substitui orm_mode)
