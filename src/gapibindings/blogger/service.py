"""
Blogger API v3 calls.
https://developers.google.com/blogger/docs/3.0/getting_started
Generated from the blogger:v3 discovery document by gapibindings.generator, do not edit.
"""
from typing import Self
import datetime

import requests

from ..calls import ApiService, Call, PagedCall, ResourceService
from .resources import (
    Blog,
    BlogList,
    BlogUserInfo,
    Comment,
    CommentList,
    Page,
    PageList,
    Pageviews,
    Post,
    PostList,
    PostUserInfo,
    PostUserInfosList,
    User,
)


class BlogUserInfosGetCall(Call):
    """
    Gets one blog and user info pair by blogId and userId.
    GET users/{userId}/blogs/{blogId}
    """
    _method_id = "blogger.blogUserInfos.get"
    _http_method = "GET"
    _path = "users/{userId}/blogs/{blogId}"
    _response = BlogUserInfo

    def __init__(self, service: ApiService, userId: str, blogId: str) -> None:
        super().__init__(service, {"userId": userId, "blogId": blogId})

    def maxPosts(self, maxPosts: int) -> Self:
        """
        Maximum number of posts to pull back with the blog.
        """
        return self._set("maxPosts", maxPosts)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BlogsGetCall(Call):
    """
    Gets one blog by ID.
    GET blogs/{blogId}
    """
    _method_id = "blogger.blogs.get"
    _http_method = "GET"
    _path = "blogs/{blogId}"
    _response = Blog

    def __init__(self, service: ApiService, blogId: str) -> None:
        super().__init__(service, {"blogId": blogId})

    def maxPosts(self, maxPosts: int) -> Self:
        """
        Maximum number of posts to pull back with the blog.
        """
        return self._set("maxPosts", maxPosts)

    def view(self, view: str) -> Self:
        """
        Access level with which to view the blog. Note that some fields require elevated access.
        "ADMIN" - Admin level detail.
        "AUTHOR" - Author level detail.
        "READER" - Reader level detail.
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BlogsGetByUrlCall(Call):
    """
    Retrieve a Blog by URL.
    GET blogs/byurl
    """
    _method_id = "blogger.blogs.getByUrl"
    _http_method = "GET"
    _path = "blogs/byurl"
    _response = Blog

    def __init__(self, service: ApiService, url: str) -> None:
        super().__init__(service, None)
        self._set("url", url)

    def view(self, view: str) -> Self:
        """
        Access level with which to view the blog. Note that some fields require elevated access.
        "ADMIN" - Admin level detail.
        "AUTHOR" - Author level detail.
        "READER" - Reader level detail.
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BlogsListByUserCall(Call):
    """
    Retrieves a list of blogs, possibly filtered.
    GET users/{userId}/blogs
    """
    _method_id = "blogger.blogs.listByUser"
    _http_method = "GET"
    _path = "users/{userId}/blogs"
    _response = BlogList

    def __init__(self, service: ApiService, userId: str) -> None:
        super().__init__(service, {"userId": userId})

    def fetchUserInfo(self, fetchUserInfo: bool) -> Self:
        """
        Whether the response is a list of blogs with per-user information instead of just blogs.
        """
        return self._set("fetchUserInfo", fetchUserInfo)

    def role(self, *role: str) -> Self:
        """
        User access types for blogs to include in the results, e.g. AUTHOR will return blogs where the user has author level access. If no roles are specified, defaults to ADMIN and AUTHOR roles.
        "ADMIN" - Admin role - Blogs where the user has Admin level access.
        "AUTHOR" - Author role - Blogs where the user has Author level access.
        "READER" - Reader role - Blogs where the user has Reader level access (to a private blog).
        """
        return self._add("role", role, ("ADMIN", "AUTHOR", "READER"))

    def status(self, *status: str) -> Self:
        """
        Blog statuses to include in the result (default: Live blogs only). Note that ADMIN access is required to view deleted blogs.
        "DELETED" - Blog has been deleted by an administrator.
        "LIVE" - Blog is currently live.
        """
        return self._add("status", status, ("DELETED", "LIVE"))

    def view(self, view: str) -> Self:
        """
        Access level with which to view the blogs. Note that some fields require elevated access.
        "ADMIN" - Admin level detail.
        "AUTHOR" - Author level detail.
        "READER" - Reader level detail.
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class CommentsApproveCall(Call):
    """
    Marks a comment as not spam.
    POST blogs/{blogId}/posts/{postId}/comments/{commentId}/approve
    """
    _method_id = "blogger.comments.approve"
    _http_method = "POST"
    _path = "blogs/{blogId}/posts/{postId}/comments/{commentId}/approve"
    _response = Comment

    def __init__(self, service: ApiService, blogId: str, postId: str, commentId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId, "commentId": commentId})


class CommentsDeleteCall(Call):
    """
    Delete a comment by ID.
    DELETE blogs/{blogId}/posts/{postId}/comments/{commentId}
    """
    _method_id = "blogger.comments.delete"
    _http_method = "DELETE"
    _path = "blogs/{blogId}/posts/{postId}/comments/{commentId}"
    _response = None

    def __init__(self, service: ApiService, blogId: str, postId: str, commentId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId, "commentId": commentId})


class CommentsGetCall(Call):
    """
    Gets one comment by ID.
    GET blogs/{blogId}/posts/{postId}/comments/{commentId}
    """
    _method_id = "blogger.comments.get"
    _http_method = "GET"
    _path = "blogs/{blogId}/posts/{postId}/comments/{commentId}"
    _response = Comment

    def __init__(self, service: ApiService, blogId: str, postId: str, commentId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId, "commentId": commentId})

    def view(self, view: str) -> Self:
        """
        Access level for the requested comment (default: READER). Note that some comments will require elevated permissions, for example comments where the parent posts which is in a draft state, or comments that are pending moderation.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Admin level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class CommentsListCall(PagedCall):
    """
    Retrieves the comments for a post, possibly filtered.
    GET blogs/{blogId}/posts/{postId}/comments
    """
    _method_id = "blogger.comments.list"
    _http_method = "GET"
    _path = "blogs/{blogId}/posts/{postId}/comments"
    _response = CommentList

    def __init__(self, service: ApiService, blogId: str, postId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId})

    def endDate(self, endDate: str|datetime.datetime) -> Self:
        """
        Latest date of comment to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("endDate", endDate)

    def fetchBodies(self, fetchBodies: bool) -> Self:
        """
        Whether the body content of the comments is included.
        """
        return self._set("fetchBodies", fetchBodies)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of comments to include in the result.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token if request is paged.
        """
        return self._set("pageToken", pageToken)

    def startDate(self, startDate: str|datetime.datetime) -> Self:
        """
        Earliest date of comment to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("startDate", startDate)

    def status(self, *status: str) -> Self:
        """
        status
        "emptied" - Comments that have had their content removed
        "live" - Comments that are publicly visible
        "pending" - Comments that are awaiting administrator approval
        "spam" - Comments marked as spam by the administrator
        """
        return self._add("status", status, ("emptied", "live", "pending", "spam"))

    def view(self, view: str) -> Self:
        """
        Access level with which to view the returned result. Note that some fields require elevated access.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class CommentsListByBlogCall(PagedCall):
    """
    Retrieves the comments for a blog, across all posts, possibly filtered.
    GET blogs/{blogId}/comments
    """
    _method_id = "blogger.comments.listByBlog"
    _http_method = "GET"
    _path = "blogs/{blogId}/comments"
    _response = CommentList

    def __init__(self, service: ApiService, blogId: str) -> None:
        super().__init__(service, {"blogId": blogId})

    def endDate(self, endDate: str|datetime.datetime) -> Self:
        """
        Latest date of comment to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("endDate", endDate)

    def fetchBodies(self, fetchBodies: bool) -> Self:
        """
        Whether the body content of the comments is included.
        """
        return self._set("fetchBodies", fetchBodies)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of comments to include in the result.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token if request is paged.
        """
        return self._set("pageToken", pageToken)

    def startDate(self, startDate: str|datetime.datetime) -> Self:
        """
        Earliest date of comment to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("startDate", startDate)

    def status(self, *status: str) -> Self:
        """
        status
        "emptied" - Comments that have had their content removed
        "live" - Comments that are publicly visible
        "pending" - Comments that are awaiting administrator approval
        "spam" - Comments marked as spam by the administrator
        """
        return self._add("status", status, ("emptied", "live", "pending", "spam"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class CommentsMarkAsSpamCall(Call):
    """
    Marks a comment as spam.
    POST blogs/{blogId}/posts/{postId}/comments/{commentId}/spam
    """
    _method_id = "blogger.comments.markAsSpam"
    _http_method = "POST"
    _path = "blogs/{blogId}/posts/{postId}/comments/{commentId}/spam"
    _response = Comment

    def __init__(self, service: ApiService, blogId: str, postId: str, commentId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId, "commentId": commentId})


class CommentsRemoveContentCall(Call):
    """
    Removes the content of a comment.
    POST blogs/{blogId}/posts/{postId}/comments/{commentId}/removecontent
    """
    _method_id = "blogger.comments.removeContent"
    _http_method = "POST"
    _path = "blogs/{blogId}/posts/{postId}/comments/{commentId}/removecontent"
    _response = Comment

    def __init__(self, service: ApiService, blogId: str, postId: str, commentId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId, "commentId": commentId})


class PageViewsGetCall(Call):
    """
    Retrieve pageview stats for a Blog.
    GET blogs/{blogId}/pageviews
    """
    _method_id = "blogger.pageViews.get"
    _http_method = "GET"
    _path = "blogs/{blogId}/pageviews"
    _response = Pageviews

    def __init__(self, service: ApiService, blogId: str) -> None:
        super().__init__(service, {"blogId": blogId})

    def range(self, *range: str) -> Self:
        """
        range
        "30DAYS" - Page view counts from the last thirty days.
        "7DAYS" - Page view counts from the last seven days.
        "all" - Total page view counts from all time.
        """
        return self._add("range", range, ("30DAYS", "7DAYS", "all"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PagesDeleteCall(Call):
    """
    Delete a page by ID.
    DELETE blogs/{blogId}/pages/{pageId}
    """
    _method_id = "blogger.pages.delete"
    _http_method = "DELETE"
    _path = "blogs/{blogId}/pages/{pageId}"
    _response = None

    def __init__(self, service: ApiService, blogId: str, pageId: str) -> None:
        super().__init__(service, {"blogId": blogId, "pageId": pageId})


class PagesGetCall(Call):
    """
    Gets one blog page by ID.
    GET blogs/{blogId}/pages/{pageId}
    """
    _method_id = "blogger.pages.get"
    _http_method = "GET"
    _path = "blogs/{blogId}/pages/{pageId}"
    _response = Page

    def __init__(self, service: ApiService, blogId: str, pageId: str) -> None:
        super().__init__(service, {"blogId": blogId, "pageId": pageId})

    def view(self, view: str) -> Self:
        """
        view
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PagesInsertCall(Call):
    """
    Add a page.
    POST blogs/{blogId}/pages
    """
    _method_id = "blogger.pages.insert"
    _http_method = "POST"
    _path = "blogs/{blogId}/pages"
    _response = Page

    def __init__(self, service: ApiService, blogId: str, page: Page) -> None:
        super().__init__(service, {"blogId": blogId}, body=page)

    def isDraft(self, isDraft: bool) -> Self:
        """
        Whether to create the page as a draft (default: false).
        """
        return self._set("isDraft", isDraft)


class PagesListCall(PagedCall):
    """
    Retrieves the pages for a blog, optionally including non-LIVE statuses.
    GET blogs/{blogId}/pages
    """
    _method_id = "blogger.pages.list"
    _http_method = "GET"
    _path = "blogs/{blogId}/pages"
    _response = PageList

    def __init__(self, service: ApiService, blogId: str) -> None:
        super().__init__(service, {"blogId": blogId})

    def fetchBodies(self, fetchBodies: bool) -> Self:
        """
        Whether to retrieve the Page bodies.
        """
        return self._set("fetchBodies", fetchBodies)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of Pages to fetch.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token if the request is paged.
        """
        return self._set("pageToken", pageToken)

    def status(self, *status: str) -> Self:
        """
        status
        "draft" - Draft (unpublished) Pages
        "live" - Pages that are publicly visible
        """
        return self._add("status", status, ("draft", "live"))

    def view(self, view: str) -> Self:
        """
        Access level with which to view the returned result. Note that some fields require elevated access.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PagesPatchCall(Call):
    """
    Update a page. This method supports patch semantics.
    PATCH blogs/{blogId}/pages/{pageId}
    """
    _method_id = "blogger.pages.patch"
    _http_method = "PATCH"
    _path = "blogs/{blogId}/pages/{pageId}"
    _response = Page

    def __init__(self, service: ApiService, blogId: str, pageId: str, page: Page) -> None:
        super().__init__(service, {"blogId": blogId, "pageId": pageId}, body=page)

    def publish(self, publish: bool) -> Self:
        """
        Whether a publish action should be performed when the page is updated (default: false).
        """
        return self._set("publish", publish)

    def revert(self, revert: bool) -> Self:
        """
        Whether a revert action should be performed when the page is updated (default: false).
        """
        return self._set("revert", revert)


class PagesPublishCall(Call):
    """
    Publishes a draft page.
    POST blogs/{blogId}/pages/{pageId}/publish
    """
    _method_id = "blogger.pages.publish"
    _http_method = "POST"
    _path = "blogs/{blogId}/pages/{pageId}/publish"
    _response = Page

    def __init__(self, service: ApiService, blogId: str, pageId: str) -> None:
        super().__init__(service, {"blogId": blogId, "pageId": pageId})


class PagesRevertCall(Call):
    """
    Revert a published or scheduled page to draft state.
    POST blogs/{blogId}/pages/{pageId}/revert
    """
    _method_id = "blogger.pages.revert"
    _http_method = "POST"
    _path = "blogs/{blogId}/pages/{pageId}/revert"
    _response = Page

    def __init__(self, service: ApiService, blogId: str, pageId: str) -> None:
        super().__init__(service, {"blogId": blogId, "pageId": pageId})


class PagesUpdateCall(Call):
    """
    Update a page.
    PUT blogs/{blogId}/pages/{pageId}
    """
    _method_id = "blogger.pages.update"
    _http_method = "PUT"
    _path = "blogs/{blogId}/pages/{pageId}"
    _response = Page

    def __init__(self, service: ApiService, blogId: str, pageId: str, page: Page) -> None:
        super().__init__(service, {"blogId": blogId, "pageId": pageId}, body=page)

    def publish(self, publish: bool) -> Self:
        """
        Whether a publish action should be performed when the page is updated (default: false).
        """
        return self._set("publish", publish)

    def revert(self, revert: bool) -> Self:
        """
        Whether a revert action should be performed when the page is updated (default: false).
        """
        return self._set("revert", revert)


class PostUserInfosGetCall(Call):
    """
    Gets one post and user info pair, by post ID and user ID. The post user info contains per-user information about the post, such as access rights, specific to the user.
    GET users/{userId}/blogs/{blogId}/posts/{postId}
    """
    _method_id = "blogger.postUserInfos.get"
    _http_method = "GET"
    _path = "users/{userId}/blogs/{blogId}/posts/{postId}"
    _response = PostUserInfo

    def __init__(self, service: ApiService, userId: str, blogId: str, postId: str) -> None:
        super().__init__(service, {"userId": userId, "blogId": blogId, "postId": postId})

    def maxComments(self, maxComments: int) -> Self:
        """
        Maximum number of comments to pull back on a post.
        """
        return self._set("maxComments", maxComments)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PostUserInfosListCall(PagedCall):
    """
    Retrieves a list of post and post user info pairs, possibly filtered. The post user info contains per-user information about the post, such as access rights, specific to the user.
    GET users/{userId}/blogs/{blogId}/posts
    """
    _method_id = "blogger.postUserInfos.list"
    _http_method = "GET"
    _path = "users/{userId}/blogs/{blogId}/posts"
    _response = PostUserInfosList

    def __init__(self, service: ApiService, userId: str, blogId: str) -> None:
        super().__init__(service, {"userId": userId, "blogId": blogId})

    def endDate(self, endDate: str|datetime.datetime) -> Self:
        """
        Latest post date to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("endDate", endDate)

    def fetchBodies(self, fetchBodies: bool) -> Self:
        """
        Whether the body content of posts is included. Default is false.
        """
        return self._set("fetchBodies", fetchBodies)

    def labels(self, labels: str) -> Self:
        """
        Comma-separated list of labels to search for.
        """
        return self._set("labels", labels)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of posts to fetch.
        """
        return self._set("maxResults", maxResults)

    def orderBy(self, orderBy: str) -> Self:
        """
        Sort order applied to search results. Default is published.
        "published" - Order by the date the post was published
        "updated" - Order by the date the post was last updated
        """
        return self._set("orderBy", orderBy, ("published", "updated"))

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token if the request is paged.
        """
        return self._set("pageToken", pageToken)

    def startDate(self, startDate: str|datetime.datetime) -> Self:
        """
        Earliest post date to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("startDate", startDate)

    def status(self, *status: str) -> Self:
        """
        status
        "draft" - Draft posts
        "live" - Published posts
        "scheduled" - Posts that are scheduled to publish in future.
        """
        return self._add("status", status, ("draft", "live", "scheduled"))

    def view(self, view: str) -> Self:
        """
        Access level with which to view the returned result. Note that some fields require elevated access.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PostsDeleteCall(Call):
    """
    Delete a post by ID.
    DELETE blogs/{blogId}/posts/{postId}
    """
    _method_id = "blogger.posts.delete"
    _http_method = "DELETE"
    _path = "blogs/{blogId}/posts/{postId}"
    _response = None

    def __init__(self, service: ApiService, blogId: str, postId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId})


class PostsGetCall(Call):
    """
    Get a post by ID.
    GET blogs/{blogId}/posts/{postId}
    """
    _method_id = "blogger.posts.get"
    _http_method = "GET"
    _path = "blogs/{blogId}/posts/{postId}"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, postId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId})

    def fetchBody(self, fetchBody: bool) -> Self:
        """
        Whether the body content of the post is included (default: true). This should be set to false when the post bodies are not required, to help minimize traffic.
        """
        return self._set("fetchBody", fetchBody)

    def fetchImages(self, fetchImages: bool) -> Self:
        """
        Whether image URL metadata for each post is included (default: false).
        """
        return self._set("fetchImages", fetchImages)

    def maxComments(self, maxComments: int) -> Self:
        """
        Maximum number of comments to pull back on a post.
        """
        return self._set("maxComments", maxComments)

    def view(self, view: str) -> Self:
        """
        Access level with which to view the returned result. Note that some fields require elevated access.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PostsGetByPathCall(Call):
    """
    Retrieve a Post by Path.
    GET blogs/{blogId}/posts/bypath
    """
    _method_id = "blogger.posts.getByPath"
    _http_method = "GET"
    _path = "blogs/{blogId}/posts/bypath"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, path: str) -> None:
        super().__init__(service, {"blogId": blogId})
        self._set("path", path)

    def maxComments(self, maxComments: int) -> Self:
        """
        Maximum number of comments to pull back on a post.
        """
        return self._set("maxComments", maxComments)

    def view(self, view: str) -> Self:
        """
        Access level with which to view the returned result. Note that some fields require elevated access.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PostsInsertCall(Call):
    """
    Add a post.
    POST blogs/{blogId}/posts
    """
    _method_id = "blogger.posts.insert"
    _http_method = "POST"
    _path = "blogs/{blogId}/posts"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, post: Post) -> None:
        super().__init__(service, {"blogId": blogId}, body=post)

    def fetchBody(self, fetchBody: bool) -> Self:
        """
        Whether the body content of the post is included with the result (default: true).
        """
        return self._set("fetchBody", fetchBody)

    def fetchImages(self, fetchImages: bool) -> Self:
        """
        Whether image URL metadata for each post is included in the returned result (default: false).
        """
        return self._set("fetchImages", fetchImages)

    def isDraft(self, isDraft: bool) -> Self:
        """
        Whether to create the post as a draft (default: false).
        """
        return self._set("isDraft", isDraft)


class PostsListCall(PagedCall):
    """
    Retrieves a list of posts, possibly filtered.
    GET blogs/{blogId}/posts
    """
    _method_id = "blogger.posts.list"
    _http_method = "GET"
    _path = "blogs/{blogId}/posts"
    _response = PostList

    def __init__(self, service: ApiService, blogId: str) -> None:
        super().__init__(service, {"blogId": blogId})

    def endDate(self, endDate: str|datetime.datetime) -> Self:
        """
        Latest post date to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("endDate", endDate)

    def fetchBodies(self, fetchBodies: bool) -> Self:
        """
        Whether the body content of posts is included (default: true). This should be set to false when the post bodies are not required, to help minimize traffic.
        """
        return self._set("fetchBodies", fetchBodies)

    def fetchImages(self, fetchImages: bool) -> Self:
        """
        Whether image URL metadata for each post is included.
        """
        return self._set("fetchImages", fetchImages)

    def labels(self, labels: str) -> Self:
        """
        Comma-separated list of labels to search for.
        """
        return self._set("labels", labels)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of posts to fetch.
        """
        return self._set("maxResults", maxResults)

    def orderBy(self, orderBy: str) -> Self:
        """
        Sort search results
        "published" - Order by the date the post was published
        "updated" - Order by the date the post was last updated
        """
        return self._set("orderBy", orderBy, ("published", "updated"))

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token if the request is paged.
        """
        return self._set("pageToken", pageToken)

    def startDate(self, startDate: str|datetime.datetime) -> Self:
        """
        Earliest post date to fetch, a date-time with RFC 3339 formatting.
        """
        return self._set("startDate", startDate)

    def status(self, *status: str) -> Self:
        """
        Statuses to include in the results.
        "draft" - Draft (non-published) posts.
        "live" - Published posts
        "scheduled" - Posts that are scheduled to publish in the future.
        """
        return self._add("status", status, ("draft", "live", "scheduled"))

    def view(self, view: str) -> Self:
        """
        Access level with which to view the returned result. Note that some fields require escalated access.
        "ADMIN" - Admin level detail
        "AUTHOR" - Author level detail
        "READER" - Reader level detail
        """
        return self._set("view", view, ("ADMIN", "AUTHOR", "READER"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PostsPatchCall(Call):
    """
    Update a post. This method supports patch semantics.
    PATCH blogs/{blogId}/posts/{postId}
    """
    _method_id = "blogger.posts.patch"
    _http_method = "PATCH"
    _path = "blogs/{blogId}/posts/{postId}"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, postId: str, post: Post) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId}, body=post)

    def fetchBody(self, fetchBody: bool) -> Self:
        """
        Whether the body content of the post is included with the result (default: true).
        """
        return self._set("fetchBody", fetchBody)

    def fetchImages(self, fetchImages: bool) -> Self:
        """
        Whether image URL metadata for each post is included in the returned result (default: false).
        """
        return self._set("fetchImages", fetchImages)

    def maxComments(self, maxComments: int) -> Self:
        """
        Maximum number of comments to retrieve with the returned post.
        """
        return self._set("maxComments", maxComments)

    def publish(self, publish: bool) -> Self:
        """
        Whether a publish action should be performed when the post is updated (default: false).
        """
        return self._set("publish", publish)

    def revert(self, revert: bool) -> Self:
        """
        Whether a revert action should be performed when the post is updated (default: false).
        """
        return self._set("revert", revert)


class PostsPublishCall(Call):
    """
    Publishes a draft post, optionally at the specific time of the given publishDate parameter.
    POST blogs/{blogId}/posts/{postId}/publish
    """
    _method_id = "blogger.posts.publish"
    _http_method = "POST"
    _path = "blogs/{blogId}/posts/{postId}/publish"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, postId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId})

    def publishDate(self, publishDate: str|datetime.datetime) -> Self:
        """
        Optional date and time to schedule the publishing of the Blog. If no publishDate parameter is given, the post is either published at the a previously saved schedule date (if present), or the current time. If a future date is given, the post will be scheduled to be published.
        """
        return self._set("publishDate", publishDate)


class PostsRevertCall(Call):
    """
    Revert a published or scheduled post to draft state.
    POST blogs/{blogId}/posts/{postId}/revert
    """
    _method_id = "blogger.posts.revert"
    _http_method = "POST"
    _path = "blogs/{blogId}/posts/{postId}/revert"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, postId: str) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId})


class PostsSearchCall(Call):
    """
    Search for a post.
    GET blogs/{blogId}/posts/search
    """
    _method_id = "blogger.posts.search"
    _http_method = "GET"
    _path = "blogs/{blogId}/posts/search"
    _response = PostList

    def __init__(self, service: ApiService, blogId: str, q: str) -> None:
        super().__init__(service, {"blogId": blogId})
        self._set("q", q)

    def fetchBodies(self, fetchBodies: bool) -> Self:
        """
        Whether the body content of posts is included (default: true). This should be set to false when the post bodies are not required, to help minimize traffic.
        """
        return self._set("fetchBodies", fetchBodies)

    def orderBy(self, orderBy: str) -> Self:
        """
        Sort search results
        "published" - Order by the date the post was published
        "updated" - Order by the date the post was last updated
        """
        return self._set("orderBy", orderBy, ("published", "updated"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class PostsUpdateCall(Call):
    """
    Update a post.
    PUT blogs/{blogId}/posts/{postId}
    """
    _method_id = "blogger.posts.update"
    _http_method = "PUT"
    _path = "blogs/{blogId}/posts/{postId}"
    _response = Post

    def __init__(self, service: ApiService, blogId: str, postId: str, post: Post) -> None:
        super().__init__(service, {"blogId": blogId, "postId": postId}, body=post)

    def fetchBody(self, fetchBody: bool) -> Self:
        """
        Whether the body content of the post is included with the result (default: true).
        """
        return self._set("fetchBody", fetchBody)

    def fetchImages(self, fetchImages: bool) -> Self:
        """
        Whether image URL metadata for each post is included in the returned result (default: false).
        """
        return self._set("fetchImages", fetchImages)

    def maxComments(self, maxComments: int) -> Self:
        """
        Maximum number of comments to retrieve with the returned post.
        """
        return self._set("maxComments", maxComments)

    def publish(self, publish: bool) -> Self:
        """
        Whether a publish action should be performed when the post is updated (default: false).
        """
        return self._set("publish", publish)

    def revert(self, revert: bool) -> Self:
        """
        Whether a revert action should be performed when the post is updated (default: false).
        """
        return self._set("revert", revert)


class UsersGetCall(Call):
    """
    Gets one user by ID.
    GET users/{userId}
    """
    _method_id = "blogger.users.get"
    _http_method = "GET"
    _path = "users/{userId}"
    _response = User

    def __init__(self, service: ApiService, userId: str) -> None:
        super().__init__(service, {"userId": userId})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BlogUserInfosService(ResourceService):

    def get(self, userId: str, blogId: str) -> BlogUserInfosGetCall:
        """
        Gets one blog and user info pair by blogId and userId.
        """
        return BlogUserInfosGetCall(self._s, userId, blogId)


class BlogsService(ResourceService):

    def get(self, blogId: str) -> BlogsGetCall:
        """
        Gets one blog by ID.
        """
        return BlogsGetCall(self._s, blogId)

    def getByUrl(self, url: str) -> BlogsGetByUrlCall:
        """
        Retrieve a Blog by URL.
        """
        return BlogsGetByUrlCall(self._s, url)

    def listByUser(self, userId: str) -> BlogsListByUserCall:
        """
        Retrieves a list of blogs, possibly filtered.
        """
        return BlogsListByUserCall(self._s, userId)


class CommentsService(ResourceService):

    def approve(self, blogId: str, postId: str, commentId: str) -> CommentsApproveCall:
        """
        Marks a comment as not spam.
        """
        return CommentsApproveCall(self._s, blogId, postId, commentId)

    def delete(self, blogId: str, postId: str, commentId: str) -> CommentsDeleteCall:
        """
        Delete a comment by ID.
        """
        return CommentsDeleteCall(self._s, blogId, postId, commentId)

    def get(self, blogId: str, postId: str, commentId: str) -> CommentsGetCall:
        """
        Gets one comment by ID.
        """
        return CommentsGetCall(self._s, blogId, postId, commentId)

    def list(self, blogId: str, postId: str) -> CommentsListCall:
        """
        Retrieves the comments for a post, possibly filtered.
        """
        return CommentsListCall(self._s, blogId, postId)

    def listByBlog(self, blogId: str) -> CommentsListByBlogCall:
        """
        Retrieves the comments for a blog, across all posts, possibly filtered.
        """
        return CommentsListByBlogCall(self._s, blogId)

    def markAsSpam(self, blogId: str, postId: str, commentId: str) -> CommentsMarkAsSpamCall:
        """
        Marks a comment as spam.
        """
        return CommentsMarkAsSpamCall(self._s, blogId, postId, commentId)

    def removeContent(self, blogId: str, postId: str, commentId: str) -> CommentsRemoveContentCall:
        """
        Removes the content of a comment.
        """
        return CommentsRemoveContentCall(self._s, blogId, postId, commentId)


class PageViewsService(ResourceService):

    def get(self, blogId: str) -> PageViewsGetCall:
        """
        Retrieve pageview stats for a Blog.
        """
        return PageViewsGetCall(self._s, blogId)


class PagesService(ResourceService):

    def delete(self, blogId: str, pageId: str) -> PagesDeleteCall:
        """
        Delete a page by ID.
        """
        return PagesDeleteCall(self._s, blogId, pageId)

    def get(self, blogId: str, pageId: str) -> PagesGetCall:
        """
        Gets one blog page by ID.
        """
        return PagesGetCall(self._s, blogId, pageId)

    def insert(self, blogId: str, page: Page) -> PagesInsertCall:
        """
        Add a page.
        """
        return PagesInsertCall(self._s, blogId, page)

    def list(self, blogId: str) -> PagesListCall:
        """
        Retrieves the pages for a blog, optionally including non-LIVE statuses.
        """
        return PagesListCall(self._s, blogId)

    def patch(self, blogId: str, pageId: str, page: Page) -> PagesPatchCall:
        """
        Update a page. This method supports patch semantics.
        """
        return PagesPatchCall(self._s, blogId, pageId, page)

    def publish(self, blogId: str, pageId: str) -> PagesPublishCall:
        """
        Publishes a draft page.
        """
        return PagesPublishCall(self._s, blogId, pageId)

    def revert(self, blogId: str, pageId: str) -> PagesRevertCall:
        """
        Revert a published or scheduled page to draft state.
        """
        return PagesRevertCall(self._s, blogId, pageId)

    def update(self, blogId: str, pageId: str, page: Page) -> PagesUpdateCall:
        """
        Update a page.
        """
        return PagesUpdateCall(self._s, blogId, pageId, page)


class PostUserInfosService(ResourceService):

    def get(self, userId: str, blogId: str, postId: str) -> PostUserInfosGetCall:
        """
        Gets one post and user info pair, by post ID and user ID. The post user info contains per-user information about the post, such as access rights, specific to the user.
        """
        return PostUserInfosGetCall(self._s, userId, blogId, postId)

    def list(self, userId: str, blogId: str) -> PostUserInfosListCall:
        """
        Retrieves a list of post and post user info pairs, possibly filtered. The post user info contains per-user information about the post, such as access rights, specific to the user.
        """
        return PostUserInfosListCall(self._s, userId, blogId)


class PostsService(ResourceService):

    def delete(self, blogId: str, postId: str) -> PostsDeleteCall:
        """
        Delete a post by ID.
        """
        return PostsDeleteCall(self._s, blogId, postId)

    def get(self, blogId: str, postId: str) -> PostsGetCall:
        """
        Get a post by ID.
        """
        return PostsGetCall(self._s, blogId, postId)

    def getByPath(self, blogId: str, path: str) -> PostsGetByPathCall:
        """
        Retrieve a Post by Path.
        """
        return PostsGetByPathCall(self._s, blogId, path)

    def insert(self, blogId: str, post: Post) -> PostsInsertCall:
        """
        Add a post.
        """
        return PostsInsertCall(self._s, blogId, post)

    def list(self, blogId: str) -> PostsListCall:
        """
        Retrieves a list of posts, possibly filtered.
        """
        return PostsListCall(self._s, blogId)

    def patch(self, blogId: str, postId: str, post: Post) -> PostsPatchCall:
        """
        Update a post. This method supports patch semantics.
        """
        return PostsPatchCall(self._s, blogId, postId, post)

    def publish(self, blogId: str, postId: str) -> PostsPublishCall:
        """
        Publishes a draft post, optionally at the specific time of the given publishDate parameter.
        """
        return PostsPublishCall(self._s, blogId, postId)

    def revert(self, blogId: str, postId: str) -> PostsRevertCall:
        """
        Revert a published or scheduled post to draft state.
        """
        return PostsRevertCall(self._s, blogId, postId)

    def search(self, blogId: str, q: str) -> PostsSearchCall:
        """
        Search for a post.
        """
        return PostsSearchCall(self._s, blogId, q)

    def update(self, blogId: str, postId: str, post: Post) -> PostsUpdateCall:
        """
        Update a post.
        """
        return PostsUpdateCall(self._s, blogId, postId, post)


class UsersService(ResourceService):

    def get(self, userId: str) -> UsersGetCall:
        """
        Gets one user by ID.
        """
        return UsersGetCall(self._s, userId)


class Service(ApiService):
    """
    Blogger API v3
    https://developers.google.com/blogger/docs/3.0/getting_started
    """
    _root_url = "https://www.googleapis.com/"
    _service_path = "blogger/v3/"

    def __init__(self, session: requests.Session, root_url: str|None = None,
                 user_agent: str = "", api_key: str|None = None) -> None:
        super().__init__(session, root_url, user_agent, api_key)
        self.blogUserInfos = BlogUserInfosService(self)
        self.blogs = BlogsService(self)
        self.comments = CommentsService(self)
        self.pageViews = PageViewsService(self)
        self.pages = PagesService(self)
        self.postUserInfos = PostUserInfosService(self)
        self.posts = PostsService(self)
        self.users = UsersService(self)
