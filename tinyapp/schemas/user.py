from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Body of /register and /login"""
    email: str = Field("", description="Account email (case-sensitive)")
    password: str = Field("", description="Plaintext password, never stored")


class UserResponse(BaseModel):
    """Public view of a user - no password hash"""
    id: str
    email: str

    model_config = ConfigDict(from_attributes=True)
