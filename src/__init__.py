"""Blog Post Service Package."""

__version__ = "1.0.0"
__description__ = "Serverless blog post API using AWS AppSync, Lambda, and DynamoDB"

__all__ = ["handlers", "core"]
