"""JSON serialization of SKUs as their canonical strings."""

import json
from typing import Any, Iterable

from tf2_sku.errors import DeserializationError, ParseError
from tf2_sku.models.sku import Sku
from tf2_sku.utils.handlers import decode_strict


class SkuJSONEncoder(json.JSONEncoder):
    """Encodes Sku objects as strings such as "264;11;kt-3"."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Sku):
            return o.to_sku_string()
        return super().default(o)


def sku_from_value(value: Any) -> Sku:
    """Strictly decode a deserialized value into a Sku."""
    if not isinstance(value, str):
        raise DeserializationError(f"invalid type: expected a SKU string, got {type(value).__name__}")
    try:
        return decode_strict(value)
    except ParseError as error:
        raise DeserializationError(str(error)) from error


def dumps(obj: Any, **kwargs) -> str:
    return json.dumps(obj, cls=SkuJSONEncoder, **kwargs)


def loads(text: str, sku_keys: Iterable[str] = ("sku",), **kwargs) -> Any:
    """
    Parse JSON, decoding the values of the given object keys into Sku objects.

    Raises DeserializationError if one of those values is not a valid SKU.
    """
    keys = frozenset(sku_keys)

    def _object_hook(obj: dict) -> dict:
        for key in keys.intersection(obj):
            obj[key] = sku_from_value(obj[key])
        return obj

    return json.loads(text, object_hook=_object_hook, **kwargs)
