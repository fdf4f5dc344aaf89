from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


def describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for err in error.errors():
        location = ".".join(str(loc) for loc in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)


class CamelModel(BaseModel):
    """Python attributes in snake_case, JSON and stored documents in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
        protected_namespaces=(),
    )
