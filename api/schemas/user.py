from pydantic import BaseModel, ConfigDict, Field

from api.redis import auth_redis


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Unique identifier for the user")
    email_verified: bool = Field(False, description="Whether the email address of the user has been verified")
    admin: bool = Field(False, description="Whether the user is an administrator")


class UserAccessTokenData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email_verified: bool
    admin: bool


class UserAccessToken(BaseModel):
    model_config = ConfigDict(extra="ignore")

    uid: str
    rt: str
    data: UserAccessTokenData

    def to_user(self) -> User:
        return User(id=self.uid, **self.data.model_dump())

    async def is_revoked(self) -> bool:
        return bool(await auth_redis.exists(f"session_logout:{self.rt}"))
