"""Marshmallow-backed model base used for JSON Web Keys."""

import logging
import sys
from typing import Type, TypeVar, Union

from marshmallow import EXCLUDE, Schema, ValidationError, post_dump, post_load

from ...core.error import BaseError

LOGGER = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound="BaseModel")


class BaseModelError(BaseError):
    """Model data does not satisfy its schema."""


class BaseModel:
    """Base model loaded and dumped through a paired `BaseModelSchema`.

    `Meta.schema_class` names the schema, either as a class or as the name of a
    class in the model's own module (so the schema can follow the model).
    """

    class Meta:
        """BaseModel metadata."""

        schema_class = None

    def __init__(self):
        """Initialize BaseModel.

        Raises:
            TypeError: If schema_class is not set on Meta

        """
        if not self.Meta.schema_class:
            raise TypeError(f"{type(self).__name__} has no schema_class")

    @classmethod
    def _get_schema_class(cls) -> Type["BaseModelSchema"]:
        schema_class = cls.Meta.schema_class
        if isinstance(schema_class, str):
            schema_class = getattr(sys.modules[cls.__module__], schema_class)
        return schema_class

    @classmethod
    def deserialize(cls: Type[ModelType], obj) -> ModelType:
        """Load and validate a dict into a model instance.

        Raises:
            BaseModelError: If the data does not satisfy the schema

        """
        schema = cls._get_schema_class()()
        try:
            return schema.load(obj)
        except (TypeError, ValueError, ValidationError) as err:
            LOGGER.debug("%s validation error: %s", cls.__name__, err)
            raise BaseModelError(f"{cls.__name__} schema validation failed") from err

    def serialize(self, *, as_string: bool = False) -> Union[str, dict]:
        """Dump the model to a dict, or to compact UTF-8 JSON if as_string is True.

        Dumping does not validate; load the result with `deserialize` for that.
        """
        schema = self._get_schema_class()()
        try:
            if as_string:
                return schema.dumps(self, separators=(",", ":"), ensure_ascii=False)
            return schema.dump(self)
        except (AttributeError, TypeError, ValueError) as err:
            LOGGER.exception("%s serialization error:", type(self).__name__)
            raise BaseModelError(
                f"{type(self).__name__} could not be serialized"
            ) from err

    def __eq__(self, other) -> bool:
        """Compare models by their serialized form."""
        if type(other) is not type(self):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self):
        """Hash by the compact JSON form."""
        return hash(self.serialize(as_string=True))

    def __repr__(self) -> str:
        """Return a human readable representation, omitting unset members."""
        items = ", ".join(
            f"{name}={value!r}"
            for name, value in vars(self).items()
            if value is not None
        )
        return f"<{type(self).__name__}({items})>"


class BaseModelSchema(Schema):
    """Schema that loads into `Meta.model_class` and dumps without None values."""

    class Meta:
        """BaseModelSchema metadata."""

        model_class = None
        unknown = EXCLUDE

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Return model instance after loading."""
        return self.Meta.model_class(**data)

    @post_dump
    def remove_none_values(self, data, **kwargs):
        """Drop members that are not set."""
        return {key: value for key, value in data.items() if value is not None}
