"""Tests for comment, group and admin schemas."""

import pytest
from pydantic import ValidationError

from app.config import ConfigKey
from app.core.site_config import site_config
from app.schemas.admin import CensorSettingsUpdate, apply_censor_settings
from app.schemas.comment import CommentCreate, CommentResponse, ReplyDraft
from app.schemas.group import GroupCreate, GroupResponse, TopicSummary
from app.services.censor import CensorFilter


@pytest.mark.unit
class TestCommentSchemas:
    """Tests for comment schemas."""

    def test_create_strips_whitespace(self):
        comment = CommentCreate(topic_id=1, post_text="  hello  ")
        assert comment.post_text == "hello"

    def test_create_rejects_empty(self):
        with pytest.raises(ValidationError):
            CommentCreate(topic_id=1, post_text="")

    def test_response_renders_html(self):
        comment = CommentResponse(
            comment_id=1, topic_id=2, username="alice", post_text="**hi** <there>"
        )
        assert comment.post_text_html == "<p><b>hi</b> &lt;there&gt;</p>"

    def test_response_html_is_censored(self):
        site_config.set(ConfigKey.CENSORED_WORDS, "there")
        comment = CommentResponse(comment_id=1, topic_id=2, username="alice", post_text="hi there")
        assert comment.post_text_html == "<p>hi ****</p>"

    def test_response_dump_includes_html(self):
        comment = CommentResponse(comment_id=1, topic_id=2, username="alice", post_text="hi")
        data = comment.model_dump()
        assert data["post_text"] == "hi"
        assert data["post_text_html"] == "<p>hi</p>"

    def test_reply_draft(self):
        draft = ReplyDraft(quoted_user="alice", original_text="hello")
        assert draft.text == "```\nalice wrote:\n> hello\n```\n"


@pytest.mark.unit
class TestGroupCreate:
    """Tests for group validation."""

    def test_valid_group(self):
        group = GroupCreate(name="  general-chat_1 ", description=" about ", header_msg="")
        assert group.name == "general-chat_1"
        assert group.description == "about"

    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            GroupCreate(name="ab")

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            GroupCreate(name="a" * 41)

    def test_name_special_characters_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            GroupCreate(name="bad name!")
        assert "english alphabets" in str(exc_info.value)

    def test_censored_name_rejected(self):
        site_config.set(ConfigKey.CENSORED_WORDS, "foo")
        with pytest.raises(ValidationError) as exc_info:
            GroupCreate(name="foobar")
        assert "Fix group name: ****bar" in str(exc_info.value)

    def test_description_too_long(self):
        with pytest.raises(ValidationError):
            GroupCreate(name="general", description="x" * 161)

    def test_header_msg_too_long(self):
        with pytest.raises(ValidationError):
            GroupCreate(name="general", header_msg="x" * 161)


@pytest.mark.unit
class TestPlainTextCensoring:
    """Plain text fields skip markup but are censored."""

    def test_group_response_censors_description_and_header(self):
        site_config.set(ConfigKey.CENSORED_WORDS, "spam")
        group = GroupResponse(name="general", description="No SPAM", header_msg="spam <b>")
        assert group.description == "No ****"
        assert group.header_msg == "**** <b>"

    def test_group_response_does_not_render_markup(self):
        group = GroupResponse(name="general", description="**not bold**")
        assert group.description == "**not bold**"

    def test_topic_title_censored(self):
        site_config.set(ConfigKey.CENSORED_WORDS, "darn")
        topic = TopicSummary(topic_id=1, title="Darn bugs", owner="bob")
        assert topic.title == "**** bugs"


@pytest.mark.unit
class TestCensorSettings:
    """Tests for admin censor settings."""

    def test_normalizes_string(self):
        update = CensorSettingsUpdate(censored_words=" foo, ,Bar ")
        assert update.censored_words == "foo,Bar"
        assert update.words == ["foo", "Bar"]

    def test_accepts_list(self):
        assert CensorSettingsUpdate(censored_words=["a", " b", ""]).censored_words == "a,b"

    def test_empty_clears(self):
        assert CensorSettingsUpdate().censored_words == ""

    def test_apply_updates_live_filter(self, fresh_site_config):
        live_filter = CensorFilter(fresh_site_config.censored_words)
        assert live_filter.censor("foo") == "foo"

        apply_censor_settings(CensorSettingsUpdate(censored_words="foo"), fresh_site_config)
        assert live_filter.censor("foo") == "****"

        apply_censor_settings(CensorSettingsUpdate(censored_words=""), fresh_site_config)
        assert live_filter.censor("foo") == "foo"

    def test_apply_defaults_to_site_config(self):
        apply_censor_settings(CensorSettingsUpdate(censored_words="zap"))
        assert site_config.censored_words() == "zap"
