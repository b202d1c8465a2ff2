from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from nc_news.dependencies.postgres import Base

DEFAULT_ARTICLE_IMG_URL = (
    "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg"
    "?w=700&h=700"
)


class Article(Base):
    __tablename__ = "articles"

    article_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False, comment="글 제목")
    topic = Column(
        String(100),
        ForeignKey("topics.slug"),
        nullable=False,
        index=True,
        comment="topics.slug",
    )
    author = Column(
        String(50),
        ForeignKey("users.username"),
        nullable=False,
        index=True,
        comment="작성자 users.username",
    )
    body = Column(Text, nullable=False, comment="글 내용")
    created_at = Column(
        DateTime, server_default=func.now(), nullable=False, index=True
    )
    # votes는 API에서 항상 상대값(votes + delta)으로만 변경됨
    votes = Column(Integer, nullable=False, default=0, server_default="0")
    article_img_url = Column(
        String(1000),
        nullable=True,
        default=DEFAULT_ARTICLE_IMG_URL,
        comment="대표 이미지 URL",
    )
