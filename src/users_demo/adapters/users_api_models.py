"""Pydantic models for the users API wire format."""

from pydantic import BaseModel, ConfigDict, Field

from users_demo.domain.models import UserRecord


class UserPayload(BaseModel):
    """User payload as exchanged with the remote service."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    age: int

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserPayload":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
        )

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )

    def to_json_body(self) -> dict[str, object]:
        """Dump the payload with camelCase keys."""
        return self.model_dump(by_alias=True)
