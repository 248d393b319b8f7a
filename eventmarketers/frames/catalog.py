"""Built-in frame layouts and lookup helpers.

Frames are compiled-in configuration: each one declares the placeholder slots
(text or image) that business profile content is poured into. The catalog is
validated once at construction, so a frame with two placeholders sharing a key
is rejected before any layer is generated from it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Number = Union[int, float]


class FrameCatalogError(ValueError):
    """Raised when a frame catalog violates id or key uniqueness."""


class FrameCategory(str, Enum):
    BUSINESS = "business"
    EVENT = "event"
    PERSONAL = "personal"
    CREATIVE = "creative"


class PlaceholderType(str, Enum):
    TEXT = "text"
    IMAGE = "image"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Placeholder(_FrozenModel):
    """One named, positioned slot within a frame."""

    type: PlaceholderType
    key: str
    x: Number
    y: Number
    width: Optional[Number] = None
    height: Optional[Number] = None
    max_width: Optional[Number] = None
    max_height: Optional[Number] = None
    font_size: Optional[Number] = None
    color: Optional[str] = None
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    text_align: Optional[TextAlign] = None


class Frame(_FrozenModel):
    id: str
    name: str
    description: str
    category: FrameCategory
    background: str
    placeholders: tuple[Placeholder, ...] = ()


class FrameCatalog:
    """Read-only, ordered collection of frames."""

    def __init__(self, frames: Iterable[Frame]) -> None:
        self._frames: tuple[Frame, ...] = tuple(frames)
        self._validate()
        self._by_id = {frame.id: frame for frame in self._frames}

    def _validate(self) -> None:
        id_counts = Counter(frame.id for frame in self._frames)
        duplicate_ids = sorted(frame_id for frame_id, count in id_counts.items() if count > 1)
        if duplicate_ids:
            raise FrameCatalogError(f"Duplicate frame ids: {', '.join(duplicate_ids)}")

        for frame in self._frames:
            key_counts = Counter(placeholder.key for placeholder in frame.placeholders)
            duplicate_keys = sorted(key for key, count in key_counts.items() if count > 1)
            if duplicate_keys:
                raise FrameCatalogError(
                    f"Frame {frame.id} has duplicate placeholder keys: {', '.join(duplicate_keys)}"
                )

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)

    def all(self) -> list[Frame]:
        return list(self._frames)

    def get_frame_by_id(self, frame_id: str) -> Optional[Frame]:
        return self._by_id.get(frame_id)

    def get_frames_by_category(self, category: Union[str, FrameCategory]) -> list[Frame]:
        """Exact, case-sensitive category match in catalog order."""

        return [frame for frame in self._frames if frame.category == category]

    def background_for(self, frame_id: str) -> Optional[str]:
        frame = self.get_frame_by_id(frame_id)
        return frame.background if frame else None


def _text(key: str, x: Number, y: Number, font_size: Number, weight: str, align: str, max_width: Number) -> Placeholder:
    return Placeholder(
        type=PlaceholderType.TEXT,
        key=key,
        x=x,
        y=y,
        font_size=font_size,
        color="#FFFFFF",
        font_family="System",
        font_weight=weight,
        text_align=align,
        max_width=max_width,
    )


def _image(key: str, x: Number, y: Number, size: Number) -> Placeholder:
    return Placeholder(type=PlaceholderType.IMAGE, key=key, x=x, y=y, width=size, height=size)


BUILTIN_FRAMES: tuple[Frame, ...] = (
    Frame(
        id="frame1",
        name="Frame 1",
        background="frames/frame1.png",
        category=FrameCategory.BUSINESS,
        description="Professional business template with clean layout",
        placeholders=(
            _text("companyName", 50, 50, 28, "bold", "left", 300),
            _text("tagline", 50, 90, 16, "normal", "left", 300),
            _image("logo", 320, 50, 80),
            _text("contact", 50, 500, 14, "normal", "left", 350),
        ),
    ),
    Frame(
        id="frame2",
        name="Frame 2",
        background="frames/frame2.jpg",
        category=FrameCategory.EVENT,
        description="Modern event template with centered layout",
        placeholders=(
            _text("eventTitle", 100, 150, 28, "bold", "center", 400),
            _text("eventDate", 100, 200, 18, "normal", "center", 400),
            _image("logo", 150, 250, 100),
            _text("organizer", 100, 380, 16, "normal", "center", 400),
        ),
    ),
    Frame(
        id="frame3",
        name="Frame 3",
        background="frames/Frame3.png",
        category=FrameCategory.PERSONAL,
        description="Elegant personal template with sophisticated layout",
        placeholders=(
            _text("name", 80, 120, 32, "bold", "left", 350),
            _text("title", 80, 170, 18, "normal", "left", 350),
            _image("profileImage", 80, 220, 120),
            _text("contact", 80, 370, 14, "normal", "left", 350),
        ),
    ),
    Frame(
        id="frame4",
        name="Frame 4",
        background="frames/frame4.png",
        category=FrameCategory.CREATIVE,
        description="Bold creative template with dynamic positioning",
        placeholders=(
            _text("brandName", 60, 80, 26, "bold", "left", 320),
            _image("logo", 60, 130, 90),
            _text("slogan", 60, 240, 16, "normal", "left", 320),
            _text("contact", 60, 280, 14, "normal", "left", 320),
        ),
    ),
    Frame(
        id="f3",
        name="Frame F3",
        background="frames/f3.png",
        category=FrameCategory.BUSINESS,
        description="Modern business frame with centered layout",
        placeholders=(
            _text("companyName", 60, 120, 28, "bold", "center", 320),
            _image("logo", 150, 180, 100),
            _text("tagline", 60, 300, 16, "normal", "center", 320),
            _text("contact", 60, 350, 14, "normal", "center", 320),
        ),
    ),
)

DEFAULT_CATALOG = FrameCatalog(BUILTIN_FRAMES)


def get_frame_by_id(frame_id: str) -> Optional[Frame]:
    return DEFAULT_CATALOG.get_frame_by_id(frame_id)


def get_frames_by_category(category: Union[str, FrameCategory]) -> list[Frame]:
    return DEFAULT_CATALOG.get_frames_by_category(category)
