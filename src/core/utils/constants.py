"""Global constants used throughout the application.

This module centralizes error codes, field names, operation names and
environment variable names shared across modules.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_UNKNOWN_FIELD = "UNKNOWN_FIELD"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"

# Authorization Errors
ERROR_CODE_UNAUTHORIZED = "UNAUTHORIZED"
ERROR_CODE_UNAUTHENTICATED = "UNAUTHENTICATED"

# Store / DynamoDB Errors
ERROR_CODE_DYNAMODB = "DYNAMODB_ERROR"
ERROR_CODE_CONDITION_FAILED = "CONDITION_FAILED"
ERROR_CODE_POST_CREATE_FAILED = "POST_CREATE_FAILED"
ERROR_CODE_POST_FETCH_FAILED = "POST_FETCH_FAILED"
ERROR_CODE_POST_UPDATE_FAILED = "POST_UPDATE_FAILED"
ERROR_CODE_POST_DELETE_FAILED = "POST_DELETE_FAILED"
ERROR_CODE_POST_LIST_FAILED = "POST_LIST_FAILED"
ERROR_CODE_POST_INVALID_FORMAT = "POST_INVALID_FORMAT"
ERROR_CODE_POST_ALREADY_EXISTS = "POST_ALREADY_EXISTS"

# Routing Errors
ERROR_CODE_UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Post Attributes
# ============================================================================

POST_ID_FIELD: Final = "id"
POST_OWNER_FIELD: Final = "owner"

# Closed set of attributes a caller may change on an existing post
UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset({"title", "content"})

DEFAULT_POSTS_BY_OWNER_INDEX = "postsByUsername"


# ============================================================================
# Resolver Operations (GraphQL field names)
# ============================================================================

OPERATION_GET_POST_BY_ID = "getPostById"
OPERATION_LIST_POSTS = "listPosts"
OPERATION_POSTS_BY_USERNAME = "postsByUsername"
OPERATION_CREATE_POST = "createPost"
OPERATION_UPDATE_POST = "updatePost"
OPERATION_DELETE_POST = "deletePost"


# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_POST_TABLE_NAME = "POST_TABLE"
ENV_POSTS_BY_OWNER_INDEX = "POSTS_BY_OWNER_INDEX"
