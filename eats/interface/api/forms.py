"""Multipart form parsing for the restaurant endpoints.

The frontend sends lists with bracketed keys:

    restaurantName=Luigi's
    cuisines[0]=Pizza
    cuisines[1]=Pasta
    menuItems[0][name]=Margherita
    menuItems[0][price]=9.5
    menuItems[0][_id]=<existing item id>
    imageFile=<file>

These are folded into nested structures and validated with RestaurantForm.
"""

import re
from dataclasses import dataclass
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.datastructures import FormData, UploadFile

from eats.application.usecase.restaurant.common import RestaurantForm
from eats.interface.error import FormError

IMAGE_FIELD = "imageFile"

_INDEXED_KEY = re.compile(r"^(?P<name>\w+)\[(?P<index>\d+)\](?:\[(?P<field>\w+)\])?$")


@dataclass(frozen=True)
class ImageUpload:
    data: bytes
    content_type: str | None


def fold_form(form: FormData) -> dict[str, Any]:
    """Turn bracketed multipart keys into lists and dicts.

    File parts are skipped. A plain key repeated several times becomes a
    list, in submission order.

    Raises:
        FormError: If one key is used both as a list item and as an object
    """
    data: dict[str, Any] = {}
    indexed: dict[str, dict[int, Any]] = {}

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            continue

        match = _INDEXED_KEY.match(key)
        if not match:
            if key in data:
                previous = data[key]
                if isinstance(previous, list):
                    previous.append(value)
                else:
                    data[key] = [previous, value]
            else:
                data[key] = value
            continue

        items = indexed.setdefault(match["name"], {})
        index = int(match["index"])
        field = match["field"]
        if field is None:
            if isinstance(items.get(index), dict):
                raise FormError(f"Conflicting form keys for {key}")
            items[index] = value
        else:
            item = items.setdefault(index, {})
            if not isinstance(item, dict):
                raise FormError(f"Conflicting form keys for {key}")
            item[field] = value

    for name, items in indexed.items():
        # Indices only order the items, gaps are ignored
        data[name] = [items[index] for index in sorted(items)]

    return data


def parse_restaurant_form(form: FormData) -> RestaurantForm:
    """Validate the restaurant fields of a multipart body.

    Raises:
        RequestValidationError: Rendered as a 400 response
    """
    try:
        return RestaurantForm.model_validate(fold_form(form))
    except FormError as e:
        raise RequestValidationError(
            [{"type": "value_error", "loc": ("body",), "msg": str(e), "input": None}]
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


async def read_image(form: FormData) -> ImageUpload | None:
    """Read the uploaded image, if the form carries one."""
    upload = form.get(IMAGE_FIELD)
    if not isinstance(upload, UploadFile):
        return None
    data = await upload.read()
    return ImageUpload(data=data, content_type=upload.content_type)
