from eventmarketers.frames.catalog import (
    BUILTIN_FRAMES,
    DEFAULT_CATALOG,
    Frame,
    FrameCatalog,
    FrameCatalogError,
    FrameCategory,
    Placeholder,
    PlaceholderType,
    get_frame_by_id,
    get_frames_by_category,
)
from eventmarketers.frames.content import BusinessProfile, map_business_profile_to_frame_content
from eventmarketers.frames.layers import Layer, compose_frame, generate_layers_from_frame

__all__ = [
    "BUILTIN_FRAMES",
    "DEFAULT_CATALOG",
    "BusinessProfile",
    "Frame",
    "FrameCatalog",
    "FrameCatalogError",
    "FrameCategory",
    "Layer",
    "Placeholder",
    "PlaceholderType",
    "compose_frame",
    "generate_layers_from_frame",
    "get_frame_by_id",
    "get_frames_by_category",
    "map_business_profile_to_frame_content",
]
