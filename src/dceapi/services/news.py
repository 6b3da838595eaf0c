"""News service - articles and announcements"""

from ..models.news import (
    ArticleByPageRequest,
    ArticleDetail,
    ArticleDetailRequest,
    ArticlePage,
)
from .base import BaseService, Endpoint

PATH_GET_ARTICLE_BY_PAGE = "/dceapi/cms/info/articleByPage"
PATH_GET_ARTICLE_DETAIL = "/dceapi/cms/info/articleDetail"


class NewsService(BaseService):
    """Articles and announcements

    Valid column ids: 244 exchange announcements, 245 exchange notices,
    246 delivery information, 248 member service announcements,
    1076 options announcements, 242 news.
    """

    get_article_by_page = Endpoint(
        PATH_GET_ARTICLE_BY_PAGE,
        ArticlePage,
        ArticleByPageRequest,
        doc="Paginated article list for a column (site_id defaults to 5).",
    )
    get_article_detail = Endpoint(
        PATH_GET_ARTICLE_DETAIL,
        ArticleDetail,
        ArticleDetailRequest,
        doc="Full article by id.",
    )
