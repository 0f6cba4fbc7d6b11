"""Typed representations of the articles returned by the news endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, AwareDatetime, BaseModel, ConfigDict, Field

from tagesschau.exceptions import ConversionError

__all__ = [
    "Article",
    "ArticleDate",
    "ARTICLE_KINDS",
    "TeaserImage",
    "Tag",
    "TextArticle",
    "VideoArticle",
    "format_article_date",
]

#: Publication timestamp; always carries the offset the API sent for the record.
ArticleDate = AwareDatetime


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Tag(_ApiModel):
    """Keyword attached to an article."""

    tag: str


class TeaserImage(_ApiModel):
    """Preview image with its size variants (variant name to image URL)."""

    title: Optional[str] = None
    copyright: Optional[str] = None
    alttext: Optional[str] = None
    image_variants: Dict[str, str] = Field(default_factory=dict, alias="imageVariants")
    kind: Optional[str] = Field(default=None, alias="type")


class _ArticleBase(_ApiModel):
    id: str = Field(validation_alias=AliasChoices("sophoraId", "externalId", "id"))
    title: str
    date: ArticleDate
    topline: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)
    ressort: Optional[str] = None
    breaking_news: bool = Field(default=False, alias="breakingNews")
    image: Optional[TeaserImage] = Field(default=None, alias="teaserImage")
    share_url: Optional[str] = Field(default=None, alias="shareURL")
    region_id: Optional[int] = Field(default=None, alias="regionId")

    def is_text(self) -> bool:
        """Return ``True`` for a :class:`TextArticle`."""

        return isinstance(self, TextArticle)

    def is_video(self) -> bool:
        """Return ``True`` for a :class:`VideoArticle`."""

        return isinstance(self, VideoArticle)

    def as_text(self) -> "TextArticle":
        """Return this article as a :class:`TextArticle` or raise :class:`ConversionError`."""

        if not isinstance(self, TextArticle):
            raise ConversionError(f"Article {self.id} is not a text article")
        return self

    def as_video(self) -> "VideoArticle":
        """Return this article as a :class:`VideoArticle` or raise :class:`ConversionError`."""

        if not isinstance(self, VideoArticle):
            raise ConversionError(f"Article {self.id} is not a video")
        return self


class TextArticle(_ArticleBase):
    """A written story (``"type": "story"``)."""

    kind: Literal["story"] = Field(alias="type")
    url: str = Field(alias="detailsweb")
    details: Optional[str] = None
    first_sentence: Optional[str] = Field(default=None, alias="firstSentence")


class VideoArticle(_ArticleBase):
    """A video item (``"type": "video"``); ``streams`` maps quality to stream URL."""

    kind: Literal["video"] = Field(alias="type")
    streams: Dict[str, str]


Article = Annotated[Union[TextArticle, VideoArticle], Field(discriminator="kind")]

#: Values of the ``type`` field that map to an article model.
ARTICLE_KINDS = frozenset({"story", "video"})


def format_article_date(value: datetime) -> str:
    """Render an article timestamp as ISO 8601 with millisecond precision."""

    return value.isoformat(timespec="milliseconds")
