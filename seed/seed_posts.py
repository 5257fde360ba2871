#!/usr/bin/env python3
"""
Seed script to populate the posts table with sample posts.

Run:
    python seed/seed_posts.py \
      --table <POST_TABLE> \
      --limit 4
"""

import argparse
import asyncio
import json
import sys
from collections import Counter
from pathlib import Path
from typing import Any, cast

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.infrastructure.aws.dynamodb_posts import DynamoDBPostStore
from handlers.posts.service import PostService

logger = Logger(service="seed")

DATA_FILE = Path(__file__).parent / "data" / "posts.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed sample blog posts into DynamoDB")

    parser.add_argument(
        "--table",
        default=None,
        help="Posts table name (defaults to POST_TABLE)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=4,
        help="Number of posts to seed",
    )

    return parser.parse_args(argv)


def load_sample_data(path: Path = DATA_FILE) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        data = cast(dict[str, Any], json.load(f))
    return cast(list[dict[str, Any]], data.get("posts", []))


async def seed_posts(service: PostService, posts: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Create each sample post as its listed owner and return the stored posts."""
    created: list[dict[str, Any]] = []

    for item in posts:
        owner = item["owner"]
        payload = {key: value for key, value in item.items() if key != "owner"}

        post = await service.create_post(payload, owner)
        logger.info("Seeded post", extra={"post_id": post["id"], "owner": owner})
        created.append(post)

    owners = Counter(post["owner"] for post in created)
    for owner in owners:
        listed = await service.posts_by_owner(owner)
        logger.info("Posts by owner", extra={"owner": owner, "count": len(listed)})

    return created


def main(argv: list[str] | None = None) -> None:
    try:
        args = parse_args(argv)
        posts = load_sample_data()[: args.limit]

        service = PostService(DynamoDBPostStore(DynamoDBAdapter(table_name=args.table)))

        logger.info("Starting seeding process", extra={"count": len(posts)})
        asyncio.run(seed_posts(service, posts))
        logger.info("Seeding completed")

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
