from sqlalchemy import Column, String

from nc_news.dependencies.postgres import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(50), primary_key=True, comment="사용자명")
    name = Column(String(100), nullable=False, comment="이름")
    avatar_url = Column(String(1000), nullable=True, comment="프로필 이미지 URL")
