r"""Unit tests for retryable_request."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from aresfetch import RetryConfig, retryable_request

TEST_URL = "https://api.example.com/data"


def test_retryable_request_no_retry_configuration(
    mock_transport: Mock, mock_response: httpx.Response, mock_sleep: Mock
) -> None:
    assert retryable_request(TEST_URL, mock_transport) is mock_response
    mock_transport.assert_called_once_with(url=TEST_URL)
    mock_sleep.assert_not_called()


def test_retryable_request_strips_retry_options(mock_transport: Mock) -> None:
    retryable_request(TEST_URL, mock_transport, retries=0, retry_on=[503], params={"q": "x"})
    mock_transport.assert_called_once_with(url=TEST_URL, params={"q": "x"})


def test_retryable_request_transport_error(mock_sleep: Mock) -> None:
    error = httpx.ConnectError("refused")
    transport = Mock(side_effect=error)

    with pytest.raises(httpx.ConnectError) as exc_info:
        retryable_request(TEST_URL, transport, retries=1, retry_delay=0.2)

    assert exc_info.value is error
    assert transport.call_count == 2
    mock_sleep.assert_called_once_with(0.2)


def test_retryable_request_config(mock_sleep: Mock) -> None:
    responses = [Mock(spec=httpx.Response, status_code=code) for code in (429, 200)]
    transport = Mock(side_effect=responses)

    response = retryable_request(TEST_URL, transport, config=RetryConfig(retry_on=[429]))

    assert response is responses[1]
    mock_sleep.assert_called_once_with(1.0)


def test_retryable_request_invalid_options(mock_transport: Mock) -> None:
    with pytest.raises(TypeError, match="retries must be an integer"):
        retryable_request(TEST_URL, mock_transport, retries="3")
    mock_transport.assert_not_called()
