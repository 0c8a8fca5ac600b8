from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Registered account.

    Created by registration and never mutated afterwards.
    The password is only ever kept as a bcrypt hash.
    """
    id: str = Field(..., description="Opaque unique id, assigned at creation")
    email: str = Field(..., description="Unique, case-sensitive")
    password_hash: str = Field(..., repr=False, description="bcrypt hash of the password")

    model_config = ConfigDict(frozen=True)
