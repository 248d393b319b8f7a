"""Turn a frame plus resolved content into editor layers."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from eventmarketers.frames.catalog import DEFAULT_CATALOG, Frame, FrameCatalog, Number, PlaceholderType
from eventmarketers.frames.content import ProfileInput, map_business_profile_to_frame_content

DEFAULT_TEXT_WIDTH = 300
TEXT_HEIGHT = 50
DEFAULT_IMAGE_SIZE = 80

DEFAULT_FONT_SIZE = 16
DEFAULT_COLOR = "#FFFFFF"
DEFAULT_FONT_FAMILY = "System"
DEFAULT_FONT_WEIGHT = "normal"
DEFAULT_TEXT_ALIGN = "left"


class _LayerModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Position(_LayerModel):
    x: Number
    y: Number


class Size(_LayerModel):
    width: Number
    height: Number


class TextStyle(_LayerModel):
    font_size: Number = DEFAULT_FONT_SIZE
    color: str = DEFAULT_COLOR
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: str = DEFAULT_FONT_WEIGHT
    text_align: str = DEFAULT_TEXT_ALIGN


class Layer(_LayerModel):
    id: str
    type: PlaceholderType
    content: str
    position: Position
    size: Size
    rotation: Number = 0
    z_index: int
    field_type: str
    style: Optional[TextStyle] = None

    def to_dict(self) -> dict[str, Any]:
        """camelCase payload for the editor; image layers carry no style."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def generate_layers_from_frame(
    frame: Frame,
    content: Mapping[str, Any],
    canvas_width: Number,
    canvas_height: Number,
) -> list[Layer]:
    """Resolve each placeholder of ``frame`` against ``content``.

    Placeholders whose content is missing or empty are skipped and do not use
    up a z-index, so the result is stacked 1..n in declaration order. The
    canvas size is accepted for callers that scale layers; positions are
    returned in frame coordinates.
    """

    layers: list[Layer] = []
    z_index = 1

    for placeholder in frame.placeholders:
        value = content.get(placeholder.key)
        if not value:
            continue

        if placeholder.type == PlaceholderType.TEXT:
            size = Size(width=placeholder.max_width or DEFAULT_TEXT_WIDTH, height=TEXT_HEIGHT)
            style = TextStyle(
                font_size=placeholder.font_size or DEFAULT_FONT_SIZE,
                color=placeholder.color or DEFAULT_COLOR,
                font_family=placeholder.font_family or DEFAULT_FONT_FAMILY,
                font_weight=placeholder.font_weight or DEFAULT_FONT_WEIGHT,
                text_align=placeholder.text_align.value if placeholder.text_align else DEFAULT_TEXT_ALIGN,
            )
        else:
            size = Size(
                width=placeholder.width or DEFAULT_IMAGE_SIZE,
                height=placeholder.height or DEFAULT_IMAGE_SIZE,
            )
            style = None

        layers.append(
            Layer(
                id=f"frame-{placeholder.key}",
                type=placeholder.type,
                content=str(value),
                position=Position(x=placeholder.x, y=placeholder.y),
                size=size,
                rotation=0,
                z_index=z_index,
                field_type=placeholder.key,
                style=style,
            )
        )
        z_index += 1

    return layers


def compose_frame(
    frame_id: str,
    profile: ProfileInput,
    canvas_width: Number,
    canvas_height: Number,
    event_date: Union[date, str, None] = None,
    catalog: FrameCatalog = DEFAULT_CATALOG,
) -> Optional[list[Layer]]:
    """Look up a frame and build its layers from a business profile."""

    frame = catalog.get_frame_by_id(frame_id)
    if frame is None:
        return None
    content = map_business_profile_to_frame_content(profile, event_date=event_date)
    return generate_layers_from_frame(frame, content, canvas_width, canvas_height)
