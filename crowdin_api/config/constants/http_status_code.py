from enum import Enum


class HttpStatusCode(Enum):
    """Status codes the Crowdin API answers with"""

    OK = 200
    CREATED = 201
    ACCEPTED = 202  # async jobs: builds, merges, clones
    NO_CONTENT = 204  # deletes

    MULTIPLE_CHOICES = 300
    NOT_MODIFIED = 304  # conditional file builds (If-None-Match)

    BAD_REQUEST = 400  # validation errors
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429

    INTERNAL_SERVER_ERROR = 500


def is_success(status_code: int) -> bool:
    """True for any 2xx status code. 304 is not a success."""
    return HttpStatusCode.OK.value <= status_code < HttpStatusCode.MULTIPLE_CHOICES.value


def is_not_modified(status_code: int) -> bool:
    return status_code == HttpStatusCode.NOT_MODIFIED.value
