from pydantic import BaseModel, ConfigDict, Field


class SchemaOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    generate_ids: bool = Field(default=False, alias="generateIds", strict=True)
