import pytest
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.utils.constants import ENV_POST_TABLE_NAME


class TestDynamoDBAdapter:
    def test_init_missing_table_env(self, monkeypatch):
        monkeypatch.delenv(ENV_POST_TABLE_NAME, raising=False)

        with pytest.raises(RuntimeError):
            DynamoDBAdapter()

    def test_explicit_table_name_wins(self, aws_mock, monkeypatch):
        monkeypatch.delenv(ENV_POST_TABLE_NAME, raising=False)

        adapter = DynamoDBAdapter(table_name="other-posts")

        assert adapter.table_name == "other-posts"

    def test_put_and_get_item_success(self, dynamodb_table):
        adapter = DynamoDBAdapter()

        adapter.put_item(item={"id": "post-1", "owner": "alice"})

        response = adapter.get_item(key={"id": "post-1"})

        assert response["Item"] == {"id": "post-1", "owner": "alice"}

    def test_put_item_with_condition_expression(self, dynamodb_table):
        adapter = DynamoDBAdapter()
        item = {"id": "post-cond", "owner": "alice"}

        adapter.put_item(item=item, condition_expression="attribute_not_exists(id)")

        with pytest.raises(ClientError):
            adapter.put_item(item=item, condition_expression="attribute_not_exists(id)")

    def test_update_item(self, dynamodb_table):
        adapter = DynamoDBAdapter()
        adapter.put_item(item={"id": "post-1", "owner": "alice", "title": "Old"})

        response = adapter.update_item(
            key={"id": "post-1"},
            UpdateExpression="set #title = :title",
            ExpressionAttributeNames={"#title": "title"},
            ExpressionAttributeValues={":title": "New"},
            ReturnValues="UPDATED_NEW",
        )

        assert response["Attributes"] == {"title": "New"}

    def test_delete_item_success(self, dynamodb_table):
        adapter = DynamoDBAdapter()

        adapter.put_item(item={"id": "post-del", "owner": "alice"})
        adapter.delete_item(key={"id": "post-del"})

        response = adapter.get_item(key={"id": "post-del"})
        assert "Item" not in response

    def test_scan_returns_items(self, dynamodb_with_multiple_posts):
        adapter = DynamoDBAdapter()

        response = adapter.scan()

        assert len(response["Items"]) == len(dynamodb_with_multiple_posts)

    def test_query_returns_items(self, dynamodb_with_multiple_posts):
        adapter = DynamoDBAdapter()

        response = adapter.query(
            IndexName="postsByUsername",
            KeyConditionExpression="#owner = :owner",
            ExpressionAttributeNames={"#owner": "owner"},
            ExpressionAttributeValues={":owner": "alice"},
        )

        assert {item["id"] for item in response["Items"]} == {"post-2", "post-4"}

    def test_get_item_bubbles_client_error(self, monkeypatch, dynamodb_table):
        adapter = DynamoDBAdapter()

        def raise_error(**_):
            raise ClientError({"Error": {"Code": "InternalError"}}, "GetItem")

        monkeypatch.setattr(adapter.table, "get_item", raise_error)

        with pytest.raises(ClientError):
            adapter.get_item(key={"id": "post-x"})

    def test_update_item_bubbles_client_error(self, monkeypatch, dynamodb_table):
        adapter = DynamoDBAdapter()

        def raise_error(**_):
            raise ClientError({"Error": {"Code": "InternalError"}}, "UpdateItem")

        monkeypatch.setattr(adapter.table, "update_item", raise_error)

        with pytest.raises(ClientError):
            adapter.update_item(key={"id": "post-x"}, UpdateExpression="set #a = :a")
