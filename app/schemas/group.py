"""
Pydantic schemas for groups and topic listings.

Group descriptions, announcements and topic titles are plain text: they skip
markup rendering but are still censored before display.
"""

import re

from pydantic import BaseModel, Field, field_validator

from app.config import ContentLimits
from app.services.censor import get_censor_filter

GROUP_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class GroupCreate(BaseModel):
    """Schema for creating or updating a group"""

    name: str = Field(
        min_length=ContentLimits.GROUP_NAME_MIN,
        max_length=ContentLimits.GROUP_NAME_MAX,
        description="Group name",
    )
    description: str = Field(
        default="", max_length=ContentLimits.GROUP_DESC_MAX, description="Group description"
    )
    header_msg: str = Field(
        default="", max_length=ContentLimits.HEADER_MSG_MAX, description="Group announcement"
    )

    @field_validator("name", "description", "header_msg", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names are shown everywhere uncensored, so reject anything the filter would mask."""
        censored = get_censor_filter().censor(v)
        if censored != v:
            raise ValueError(f"Fix group name: {censored}")
        if not GROUP_NAME_RE.match(v):
            raise ValueError(
                "Name can contain only english alphabets, numbers, hyphens, and underscore."
            )
        return v


class GroupResponse(BaseModel):
    """Response schema for a group page header"""

    name: str
    description: str = ""
    header_msg: str = ""

    model_config = {"from_attributes": True}

    @field_validator("description", "header_msg")
    @classmethod
    def censor_text(cls, v: str) -> str:
        return get_censor_filter().censor(v)


class TopicSummary(BaseModel):
    """Topic row in a group or front page listing"""

    topic_id: int
    title: str
    owner: str
    num_comments: int = 0

    model_config = {"from_attributes": True}

    @field_validator("title")
    @classmethod
    def censor_title(cls, v: str) -> str:
        return get_censor_filter().censor(v)
