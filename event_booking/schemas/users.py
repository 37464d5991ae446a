from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class SignupRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    # bcrypt only looks at the first 72 bytes
    password: str = Field(min_length=1, max_length=72)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ProfileUpdate(BaseModel):
    username: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(default=None, max_length=72)


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class MessageOut(BaseModel):
    message: str


class TokenOut(MessageOut):
    token: str


class ProfileUpdateOut(MessageOut):
    user: UserOut
