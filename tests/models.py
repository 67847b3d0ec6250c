"""SQLAlchemy models used by the test suite."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    author_id: Mapped[str] = mapped_column(String(36), nullable=False)

    comments: Mapped[list["Comment"]] = relationship(back_populates="post")


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    post_id: Mapped[str] = mapped_column(ForeignKey("posts.id"), nullable=False)
    body: Mapped[str] = mapped_column(String(500), nullable=False)

    post: Mapped[Post] = relationship(back_populates="comments")


class BlogPost:
    """Plain class used to check resource naming of CamelCase models."""


class HTTPRequestLog:
    """Plain class used to check resource naming of acronym models."""
