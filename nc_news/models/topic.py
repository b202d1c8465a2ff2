from sqlalchemy import Column, String

from nc_news.dependencies.postgres import Base


class Topic(Base):
    __tablename__ = "topics"

    slug = Column(String(100), primary_key=True, comment="토픽 식별자(ex - cats)")
    description = Column(String(500), nullable=False, comment="토픽 설명")
