#!/usr/bin/env python3
"""
Cleanup script to remove seeded posts.

Run:
    python seed/cleanup_posts.py \
      --table <POST_TABLE> \
      --owner <USERNAME>
"""

import argparse
import asyncio
import sys

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.infrastructure.aws.dynamodb_posts import DynamoDBPostStore
from core.repositories.post_repository import PostRepository

logger = Logger(service="cleanup")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete blog posts from DynamoDB")

    parser.add_argument(
        "--table",
        default=None,
        help="Posts table name (defaults to POST_TABLE)",
    )
    parser.add_argument(
        "--owner",
        default=None,
        help="Only delete posts owned by this user",
    )

    return parser.parse_args(argv)


async def cleanup_posts(store: PostRepository, owner: str | None = None) -> int:
    """Delete every post, or only ``owner``'s posts, and return how many were removed."""
    if owner:
        posts = await store.query_posts_by_owner(owner=owner)
    else:
        posts = await store.scan_posts()

    if not posts:
        logger.info("No posts found for cleanup", extra={"owner": owner})
        return 0

    for post in posts:
        await store.delete_post(post_id=post["id"])
        logger.info("Deleted post", extra={"post_id": post["id"]})

    return len(posts)


def main(argv: list[str] | None = None) -> None:
    try:
        args = parse_args(argv)
        store = DynamoDBPostStore(DynamoDBAdapter(table_name=args.table))

        logger.info("Starting cleanup process", extra={"owner": args.owner})
        deleted = asyncio.run(cleanup_posts(store, args.owner))
        logger.info("Cleanup completed successfully", extra={"deleted": deleted})

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
