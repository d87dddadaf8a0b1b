from blogapi.routers import (
    blog_categories,
    blog_tags,
    blogs,
    categories,
    comments,
    drafts,
    likes,
    tags,
    users,
)

all_routers = [
    users.router,
    blogs.router,
    tags.router,
    categories.router,
    blog_tags.router,
    blog_categories.router,
    drafts.router,
    comments.router,
    likes.router,
]
