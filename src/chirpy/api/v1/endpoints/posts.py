"""Post endpoints for the Chirpy API."""

from fastapi import APIRouter, Response, status

from chirpy.api.v1.dependencies import BearerTokenDep, PostRepoDep
from chirpy.core.errors import NotFoundError
from chirpy.schemas.post import PostCreate, PostOut
from chirpy.services.post_service import submit_post, to_post_out

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    summary="Create a post",
    status_code=status.HTTP_201_CREATED,
    response_model=PostOut,
)
def create_post(payload: PostCreate, repo: PostRepoDep, token: BearerTokenDep) -> PostOut:
    """Store a scrubbed post owned by the authenticated account."""
    post = submit_post(repo=repo, body=payload.body, token=token)
    return to_post_out(post)


@router.get("", summary="List posts", response_model=list[PostOut])
def list_posts(repo: PostRepoDep) -> list[PostOut]:
    """Return every post in ascending id order."""
    return [to_post_out(post) for post in repo.list_all()]


@router.get("/{post_id}", summary="Get a post", response_model=PostOut)
def get_post(post_id: int, repo: PostRepoDep) -> PostOut:
    """Return a single post."""
    post = repo.get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return to_post_out(post)


@router.delete(
    "/{post_id}",
    summary="Delete a post",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_post(post_id: int, repo: PostRepoDep, token: BearerTokenDep) -> Response:
    """Delete a post; only its author may do so."""
    repo.delete(post_id, token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
