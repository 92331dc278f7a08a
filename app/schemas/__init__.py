"""
Pydantic schemas for rendered forum content
"""
from app.schemas.admin import CensorSettingsUpdate
from app.schemas.comment import CommentCreate, CommentResponse, ReplyDraft
from app.schemas.group import GroupCreate, GroupResponse, TopicSummary

__all__ = [
    "CensorSettingsUpdate",
    "CommentCreate",
    "CommentResponse",
    "GroupCreate",
    "GroupResponse",
    "ReplyDraft",
    "TopicSummary",
]
