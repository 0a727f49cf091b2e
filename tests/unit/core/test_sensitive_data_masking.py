import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_password_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert result["header"] == "token=***MASKED***"

    def test_api_key_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "query": "api_key: k-998877"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "k-998877" not in result["query"]

    def test_identifiers_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "catalog.item_created", "item_id": "2N1yQqzh1fhkGEPv5rJRqOZqxE3"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["item_id"] == "2N1yQqzh1fhkGEPv5rJRqOZqxE3"
        assert result["event"] == "catalog.item_created"

    def test_non_string_values_untouched(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "order.placed", "lines": 3}
        assert mask_sensitive_data(None, None, event_dict)["lines"] == 3
