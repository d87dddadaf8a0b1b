# Services package.
#
# One CrudService subclass per resource, each bound to the request's
# AsyncSession by the router layer:
#
#   user_service      - users (self-service update/delete)
#   blog_service      - blogs, owned by their author
#   tag_service       - tags and blog <-> tag links
#   category_service  - categories and blog <-> category links
#   draft_service     - drafts, owned by their creator
#   comment_service   - comments, owned by the commenter
#   like_service      - likes, owned by the liker
#
# The transaction boundary stays with the ``get_db`` dependency.
