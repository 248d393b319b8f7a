"""Business profile to frame content mapping."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

FrameContent = dict[str, str]

PHONE_GLYPH = "\U0001F4DE"
EMAIL_GLYPH = "\U0001F4E7"
WEBSITE_GLYPH = "\U0001F310"
ADDRESS_GLYPH = "\U0001F4CD"


class BusinessProfile(BaseModel):
    """The subset of a business profile that frames can display."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    name: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    category: Optional[str] = None
    company_logo: Optional[str] = None
    logo: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if not value:
            return None
        return str(value)


ProfileInput = Union[BusinessProfile, Mapping[str, Any], Any, None]


def _as_profile(profile: ProfileInput) -> BusinessProfile:
    if profile is None:
        return BusinessProfile()
    if isinstance(profile, BusinessProfile):
        return profile
    if isinstance(profile, Mapping):
        return BusinessProfile.model_validate(dict(profile))
    return BusinessProfile.model_validate(profile, from_attributes=True)


def format_short_date(value: date) -> str:
    """US short date without zero padding, e.g. 3/7/2026."""

    return f"{value.month}/{value.day}/{value.year}"


def build_contact_block(profile: BusinessProfile) -> str:
    lines = [
        profile.name or "",
        f"{PHONE_GLYPH} {profile.phone}" if profile.phone else "",
        f"{EMAIL_GLYPH} {profile.email}" if profile.email else "",
        f"{WEBSITE_GLYPH} {profile.website}" if profile.website else "",
        f"{ADDRESS_GLYPH} {profile.address}" if profile.address else "",
    ]
    return "\n".join(line for line in lines if line)


def map_business_profile_to_frame_content(
    profile: ProfileInput,
    event_date: Union[date, str, None] = None,
) -> FrameContent:
    """Flatten a business profile into the content keys frames refer to.

    Every key is always present and every value is a string; missing profile
    fields become ``''``. ``event_date`` fills ``eventDate``: a date is
    formatted as a short date, a string is used as is, and ``None`` means today.
    """

    profile = _as_profile(profile)
    name = profile.name or ""
    description = profile.description or ""
    logo = profile.company_logo or profile.logo or ""

    if event_date is None:
        event_date = date.today()
    event_date_text = event_date if isinstance(event_date, str) else format_short_date(event_date)

    return {
        "companyName": name,
        "tagline": description,
        "logo": logo,
        "contact": build_contact_block(profile),
        "brandName": name,
        "slogan": description,
        "name": name,
        "title": profile.category or "",
        "profileImage": logo,
        "eventTitle": name,
        "eventDate": event_date_text,
        "organizer": name,
        "companyLogo": logo,
        "companyDescription": description,
        "companyPhone": profile.phone or "",
        "companyEmail": profile.email or "",
        "companyWebsite": profile.website or "",
        "companyAddress": profile.address or "",
    }
