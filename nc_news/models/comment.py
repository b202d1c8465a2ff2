from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from nc_news.dependencies.postgres import Base


class Comment(Base):
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    article_id = Column(
        Integer,
        ForeignKey("articles.article_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="글 ID",
    )
    author = Column(
        String(50),
        ForeignKey("users.username"),
        nullable=False,
        comment="작성자 users.username",
    )
    body = Column(Text, nullable=False, comment="댓글 내용")
    votes = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime, server_default=func.now(), nullable=False, index=True
    )
