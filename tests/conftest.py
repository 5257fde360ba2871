"""
Pytest configuration and fixtures for blog post tests.
Provides AWS mocking and a DynamoDB posts table with proper cleanup.
"""

import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("POST_TABLE", "blog-posts-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "blog-posts")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "BlogPosts")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.pop("AWS_ENDPOINT_URL", None)

from core.infrastructure.aws.dynamodb_posts import DynamoDBPostStore  # noqa: E402
from handlers.posts.router import PostRouter  # noqa: E402
from handlers.posts.service import PostService  # noqa: E402


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_dynamodb_table(dynamodb_resource):
    """Helper to create the posts table with its owner index."""
    table_name = os.getenv("POST_TABLE")

    return dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "id", "AttributeType": "S"},
            {"AttributeName": "owner", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": "postsByUsername",
                "KeySchema": [
                    {"AttributeName": "owner", "KeyType": "HASH"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
    )


def _cleanup_dynamodb_items(table):
    """Helper to delete all items from DynamoDB table."""
    try:
        response = table.scan(ProjectionExpression="id")
        items = response.get("Items", [])

        while True:
            if items:
                with table.batch_writer() as batch:
                    for item in items:
                        batch.delete_item(Key={"id": item["id"]})

            if "LastEvaluatedKey" not in response:
                break

            response = table.scan(
                ProjectionExpression="id",
                ExclusiveStartKey=response["LastEvaluatedKey"],
            )
            items = response.get("Items", [])
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create and manage the posts table for testing.

    Cleanup Strategy:
    - Items are deleted after each test (teardown)
    - Table is NOT deleted (moto cleans up on context exit)
    """
    table_name = os.getenv("POST_TABLE")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_dynamodb_table(dynamodb_resource)
        table.wait_until_exists()

    yield table

    _cleanup_dynamodb_items(table)


@pytest.fixture
def dynamodb_put_item(dynamodb_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single item into DynamoDB.

    Usage:
        item = dynamodb_put_item({"id": "post-1", "owner": "alice"})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        dynamodb_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_put_multiple_items(
    dynamodb_table,
) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    """Helper to insert multiple items into DynamoDB."""

    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with dynamodb_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    """
    Helper to get a single item from DynamoDB.

    Usage:
        item = dynamodb_get_item("post-1")
    """

    def _get(post_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"id": post_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture
def post_store(dynamodb_table) -> DynamoDBPostStore:
    return DynamoDBPostStore()


@pytest.fixture
def post_service(post_store) -> PostService:
    return PostService(post_store)


@pytest.fixture
def post_router(post_service) -> PostRouter:
    return PostRouter(post_service)


@pytest.fixture
def sample_post() -> dict[str, Any]:
    """Single stored post for testing."""
    return {
        "id": "post-1",
        "title": "Hello",
        "content": "# Hello\n\nFirst post.",
        "owner": "alice",
    }


@pytest.fixture
def multiple_posts() -> list[dict[str, Any]]:
    """Posts from several owners for list/query tests."""
    return [
        {"id": "post-2", "title": "Second", "content": "Two", "owner": "alice"},
        {"id": "post-3", "title": "Bob's", "content": "Three", "owner": "bob"},
        {"id": "post-4", "title": "Fourth", "content": "Four", "owner": "alice"},
        {"id": "post-5", "title": "Carol's", "content": "Five", "owner": "carol"},
    ]


@pytest.fixture
def dynamodb_with_multiple_posts(
    dynamodb_put_multiple_items,
    multiple_posts,
) -> list[dict[str, Any]]:
    """Posts table pre-populated with several posts."""
    items: list[dict[str, Any]] = dynamodb_put_multiple_items(multiple_posts)
    return items
