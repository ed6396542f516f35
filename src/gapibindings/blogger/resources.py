"""
Blogger API v3 resources.
Generated from the blogger:v3 discovery document by gapibindings.generator, do not edit.
"""
from dataclasses import dataclass, field
from typing import List

from ..resources import GoogleAPIResourceBase


@dataclass
class BlogLocale(GoogleAPIResourceBase):
    """
    The locale this Blog is set to.
    """
    country: str|None = field(default=None)
    language: str|None = field(default=None)
    variant: str|None = field(default=None)


@dataclass
class BlogPages(GoogleAPIResourceBase):
    """
    The container of pages in this blog.
    """
    selfLink: str|None = field(default=None)
    totalItems: int|None = field(default=None)


@dataclass
class PostAuthorImage(GoogleAPIResourceBase):
    """
    The Post author's avatar.
    """
    url: str|None = field(default=None)


@dataclass
class PostAuthor(GoogleAPIResourceBase):
    """
    The author of this Post.
    """
    displayName: str|None = field(default=None)
    id: str|None = field(default=None)
    image: PostAuthorImage|None = field(default=None)
    url: str|None = field(default=None)


@dataclass
class PostBlog(GoogleAPIResourceBase):
    """
    Data about the blog containing this Post.
    """
    id: str|None = field(default=None)


@dataclass
class PostImages(GoogleAPIResourceBase):
    """
    Display image for the Post.
    """
    url: str|None = field(default=None)


@dataclass
class PostLocation(GoogleAPIResourceBase):
    """
    The location for geotagged posts.
    """
    lat: float|None = field(default=None)
    lng: float|None = field(default=None)
    name: str|None = field(default=None)
    span: str|None = field(default=None)


@dataclass
class CommentAuthorImage(GoogleAPIResourceBase):
    """
    The comment creator's avatar.
    """
    url: str|None = field(default=None)


@dataclass
class CommentAuthor(GoogleAPIResourceBase):
    """
    The author of this Comment.
    """
    displayName: str|None = field(default=None)
    id: str|None = field(default=None)
    image: CommentAuthorImage|None = field(default=None)
    url: str|None = field(default=None)


@dataclass
class CommentBlog(GoogleAPIResourceBase):
    """
    Data about the blog containing this comment.
    """
    id: str|None = field(default=None)


@dataclass
class CommentInReplyTo(GoogleAPIResourceBase):
    """
    Data about the comment this is in reply to.
    """
    id: str|None = field(default=None)


@dataclass
class CommentPost(GoogleAPIResourceBase):
    """
    Data about the post containing this comment.
    """
    id: str|None = field(default=None)


@dataclass
class Comment(GoogleAPIResourceBase):
    """
    Comment resource of the Blogger API.
    """
    author: CommentAuthor|None = field(default=None)
    blog: CommentBlog|None = field(default=None)
    content: str|None = field(default=None)
    id: str|None = field(default=None)
    inReplyTo: CommentInReplyTo|None = field(default=None)
    kind: str|None = field(default=None)
    post: CommentPost|None = field(default=None)
    published: str|None = field(default=None)
    selfLink: str|None = field(default=None)
    status: str|None = field(default=None)
    updated: str|None = field(default=None)


@dataclass
class PostReplies(GoogleAPIResourceBase):
    """
    The container of comments on this Post.
    """
    _int64 = ("totalItems",)
    items: List[Comment]|None = field(default=None)
    selfLink: str|None = field(default=None)
    totalItems: int|None = field(default=None)


@dataclass
class Post(GoogleAPIResourceBase):
    """
    Post resource of the Blogger API.
    """
    author: PostAuthor|None = field(default=None)
    blog: PostBlog|None = field(default=None)
    content: str|None = field(default=None)
    customMetaData: str|None = field(default=None)
    etag: str|None = field(default=None)
    id: str|None = field(default=None)
    images: List[PostImages]|None = field(default=None)
    kind: str|None = field(default=None)
    labels: List[str]|None = field(default=None)
    location: PostLocation|None = field(default=None)
    published: str|None = field(default=None)
    readerComments: str|None = field(default=None)
    replies: PostReplies|None = field(default=None)
    selfLink: str|None = field(default=None)
    status: str|None = field(default=None)
    title: str|None = field(default=None)
    titleLink: str|None = field(default=None)
    updated: str|None = field(default=None)
    url: str|None = field(default=None)


@dataclass
class BlogPosts(GoogleAPIResourceBase):
    """
    The container of posts in this blog.
    """
    items: List[Post]|None = field(default=None)
    selfLink: str|None = field(default=None)
    totalItems: int|None = field(default=None)


@dataclass
class Blog(GoogleAPIResourceBase):
    """
    Blog resource of the Blogger API.
    """
    customMetaData: str|None = field(default=None)
    description: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    locale: BlogLocale|None = field(default=None)
    name: str|None = field(default=None)
    pages: BlogPages|None = field(default=None)
    posts: BlogPosts|None = field(default=None)
    published: str|None = field(default=None)
    selfLink: str|None = field(default=None)
    status: str|None = field(default=None)
    updated: str|None = field(default=None)
    url: str|None = field(default=None)


@dataclass
class BlogPerUserInfo(GoogleAPIResourceBase):
    """
    BlogPerUserInfo resource of the Blogger API.
    """
    blogId: str|None = field(default=None)
    hasAdminAccess: bool|None = field(default=None)
    kind: str|None = field(default=None)
    photosAlbumKey: str|None = field(default=None)
    role: str|None = field(default=None)
    userId: str|None = field(default=None)


@dataclass
class BlogUserInfo(GoogleAPIResourceBase):
    """
    BlogUserInfo resource of the Blogger API.
    """
    blog: Blog|None = field(default=None)
    blog_user_info: BlogPerUserInfo|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class BlogList(GoogleAPIResourceBase):
    """
    BlogList resource of the Blogger API.
    """
    blogUserInfos: List[BlogUserInfo]|None = field(default=None)
    items: List[Blog]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class CommentList(GoogleAPIResourceBase):
    """
    CommentList resource of the Blogger API.
    """
    etag: str|None = field(default=None)
    items: List[Comment]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    prevPageToken: str|None = field(default=None)


@dataclass
class PageAuthorImage(GoogleAPIResourceBase):
    """
    The page author's avatar.
    """
    url: str|None = field(default=None)


@dataclass
class PageAuthor(GoogleAPIResourceBase):
    """
    The author of this Page.
    """
    displayName: str|None = field(default=None)
    id: str|None = field(default=None)
    image: PageAuthorImage|None = field(default=None)
    url: str|None = field(default=None)


@dataclass
class PageBlog(GoogleAPIResourceBase):
    """
    Data about the blog containing this Page.
    """
    id: str|None = field(default=None)


@dataclass
class Page(GoogleAPIResourceBase):
    """
    Page resource of the Blogger API.
    """
    author: PageAuthor|None = field(default=None)
    blog: PageBlog|None = field(default=None)
    content: str|None = field(default=None)
    etag: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    published: str|None = field(default=None)
    selfLink: str|None = field(default=None)
    status: str|None = field(default=None)
    title: str|None = field(default=None)
    updated: str|None = field(default=None)
    url: str|None = field(default=None)


@dataclass
class PageList(GoogleAPIResourceBase):
    """
    PageList resource of the Blogger API.
    """
    etag: str|None = field(default=None)
    items: List[Page]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class PageviewsCounts(GoogleAPIResourceBase):
    """
    The container of posts in this blog.
    """
    _int64 = ("count",)
    count: int|None = field(default=None)
    timeRange: str|None = field(default=None)


@dataclass
class Pageviews(GoogleAPIResourceBase):
    """
    Pageviews resource of the Blogger API.
    """
    blogId: str|None = field(default=None)
    counts: List[PageviewsCounts]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class PostList(GoogleAPIResourceBase):
    """
    PostList resource of the Blogger API.
    """
    etag: str|None = field(default=None)
    items: List[Post]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class PostPerUserInfo(GoogleAPIResourceBase):
    """
    PostPerUserInfo resource of the Blogger API.
    """
    blogId: str|None = field(default=None)
    hasEditAccess: bool|None = field(default=None)
    kind: str|None = field(default=None)
    postId: str|None = field(default=None)
    userId: str|None = field(default=None)


@dataclass
class PostUserInfo(GoogleAPIResourceBase):
    """
    PostUserInfo resource of the Blogger API.
    """
    kind: str|None = field(default=None)
    post: Post|None = field(default=None)
    post_user_info: PostPerUserInfo|None = field(default=None)


@dataclass
class PostUserInfosList(GoogleAPIResourceBase):
    """
    PostUserInfosList resource of the Blogger API.
    """
    items: List[PostUserInfo]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class UserBlogs(GoogleAPIResourceBase):
    """
    The container of blogs for this user.
    """
    selfLink: str|None = field(default=None)


@dataclass
class UserLocale(GoogleAPIResourceBase):
    """
    This user's locale
    """
    country: str|None = field(default=None)
    language: str|None = field(default=None)
    variant: str|None = field(default=None)


@dataclass
class User(GoogleAPIResourceBase):
    """
    User resource of the Blogger API.
    """
    about: str|None = field(default=None)
    blogs: UserBlogs|None = field(default=None)
    created: str|None = field(default=None)
    displayName: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    locale: UserLocale|None = field(default=None)
    selfLink: str|None = field(default=None)
    url: str|None = field(default=None)
