"""News and announcement models"""

from pydantic import Field, field_validator

from .base import NullableInt, NullableStr, RequestModel, ResponseModel, validate_required

# Column ids accepted by the article list endpoint
ARTICLE_COLUMNS: dict[str, str] = {
    "244": "Exchange announcements",
    "245": "Exchange notices",
    "246": "Delivery information",
    "248": "Member service announcements",
    "1076": "Options announcements",
    "242": "News",
}

DEFAULT_SITE_ID = 5


def is_valid_column_id(column_id: str) -> bool:
    return column_id in ARTICLE_COLUMNS


class Article(ResponseModel):
    """Article summary or detail"""

    id: NullableStr = ""
    title: NullableStr = ""
    sub_title: NullableStr = ""
    summary: NullableStr = Field("", alias="infoSummary")
    show_date: NullableStr = ""
    create_date: NullableStr = ""
    content: NullableStr = ""
    keywords: NullableStr = ""
    page_name: NullableStr = ""


ArticleDetail = Article


class ArticlePage(ResponseModel):
    """One page of the article list"""

    column_id: NullableStr = ""
    total_count: NullableInt = 0
    result_list: list[Article] = Field(default_factory=list)


class ArticleByPageRequest(RequestModel):
    column_id: str
    page_no: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1, le=100)
    site_id: int = DEFAULT_SITE_ID

    @field_validator("column_id", mode="before")
    @classmethod
    def validate_column_id(cls, v):
        v = str(v)
        if not is_valid_column_id(v):
            raise ValueError(
                "invalid column_id, must be one of: "
                + ", ".join(ARTICLE_COLUMNS)
            )
        return v

    @field_validator("site_id")
    @classmethod
    def default_site_id(cls, v):
        return v or DEFAULT_SITE_ID


class ArticleDetailRequest(RequestModel):
    article_id: str

    @field_validator("article_id")
    @classmethod
    def validate_article_id(cls, v):
        return validate_required(v)
