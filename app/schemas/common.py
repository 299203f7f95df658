from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError, model_validator
from pydantic.alias_generators import to_camel

from app.core.exceptions import ValidationError, format_validation_errors

Model = TypeVar("Model", bound="CamelModel")


class CamelModel(BaseModel):
    """Campos snake_case no Python, camelCase no JSON e no Firestore."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_document(self) -> Dict[str, Any]:
        # Só o que veio no payload: patches fazem merge apenas desses campos
        return self.model_dump(by_alias=True, exclude_unset=True)


class PartialModel(CamelModel):
    """Base dos PATCH: todo campo é opcional, mas se vier não pode ser null."""

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            type(self).model_fields[name].alias or name
            for name in self.model_fields_set
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"campos não podem ser null: {', '.join(nulls)}")
        return self


def parse_payload(model: Type[Model], data: Any) -> Model:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e.errors()))
