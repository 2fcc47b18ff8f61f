import logging

from config.settings import mask_sensitive_data


class TestStructuredLogging:
    def test_request_lifecycle_logged_with_correlation_id(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        messages = [record.getMessage() for record in caplog.records]
        started = [m for m in messages if "request_started" in m]
        finished = [m for m in messages if "request_finished" in m]
        assert started and finished
        assert custom_id in started[0]
        assert "duration_ms" in finished[0]

    def test_failed_write_is_logged_as_error(self, api_client, caplog):
        with caplog.at_level(logging.ERROR, logger="modules.products.views"):
            api_client.post("/api/v1/products", data="{", content_type="application/json")
        assert any(
            "product.body_bind_failed" in record.getMessage()
            for record in caplog.records
            if record.levelno == logging.ERROR
        )


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_api_key_masked_in_log_output(self):
        event_dict = {"event": "test", "query": "page=2&api_key=k-987, name=x"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "k-987" not in result["query"]
        assert "page=2" in result["query"]

    def test_authorization_header_masked(self):
        event_dict = {"event": "test", "headers": "Authorization: Bearer-xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "Bearer-xyz" not in result["headers"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.created", "sku": "SKU-001", "count": 3}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "product.created", "sku": "SKU-001", "count": 3}
