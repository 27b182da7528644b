"""
Shared request/response model base.

JSON bodies use camelCase keys; snake_case field names are accepted too.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
