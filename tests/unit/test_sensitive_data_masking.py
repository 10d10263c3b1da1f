import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_phone_number_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "phone": "+1234567890"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "1234567890" not in result["phone"]
        assert "***MASKED***" in result["phone"]

    def test_phone_number_inside_text_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "detail": "call 5511999998888 later"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "5511999998888" not in result["detail"]

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
        assert "***MASKED***" in result["header"]

    def test_uuid_not_masked(self):
        from config.settings import mask_sensitive_data

        cid = "00000000-0000-0000-0000-000000000000"
        event_dict = {"event": "customer.not_found", "customer_id": cid}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["customer_id"] == cid

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "customer.created", "email": "john@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["email"] == "john@example.com"
        assert result["event"] == "customer.created"
