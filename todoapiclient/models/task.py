from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Task(BaseModel):
    """A todo item as exchanged with the API.

    Wire names differ from attribute names: userId -> user_id, completed -> is_finished.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    title: str
    is_finished: bool = Field(alias="completed")

    def to_json(self) -> bytes:
        """Serialize with wire field names, in declaration order."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


TaskList = TypeAdapter(list[Task])
