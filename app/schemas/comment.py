"""
Pydantic schemas for comments and reply composition
"""

from pydantic import BaseModel, Field, computed_field, field_validator

from app.utils.markdown import quote_for_reply, render


class CommentCreate(BaseModel):
    """Schema for creating a new comment"""

    topic_id: int = Field(description="ID of topic to comment on")
    post_text: str = Field(min_length=1, description="Comment text (markup supported)")

    @field_validator("post_text")
    @classmethod
    def sanitize_post_text(cls, v: str) -> str:
        """
        For markup fields, we store raw user input and let render() handle
        HTML escaping at display time. We only trim whitespace here.
        """
        return v.strip()


class CommentResponse(BaseModel):
    """
    Schema for comment response.

    post_text is the raw stored text; post_text_html is what templates embed.
    """

    comment_id: int
    topic_id: int
    username: str
    post_text: str

    model_config = {"from_attributes": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def post_text_html(self) -> str:
        """Rendered and censored HTML from post_text"""
        return render(self.post_text)


class ReplyDraft(BaseModel):
    """Pre-filled reply text quoting an existing comment"""

    quoted_user: str
    original_text: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def text(self) -> str:
        return quote_for_reply(self.quoted_user, self.original_text)
