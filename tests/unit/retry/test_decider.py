r"""Unit tests for retry decider."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from aresfetch.retry import AttemptOutcome, RetryDecider


def ok_outcome(status_code: int = 200) -> AttemptOutcome:
    return AttemptOutcome(response=httpx.Response(status_code))


def error_outcome() -> AttemptOutcome:
    return AttemptOutcome(error=httpx.ConnectError("connection refused"))


def test_retry_decider_creation() -> None:
    decider = RetryDecider(retries=3, retry_on=(500, 503))
    assert decider.retries == 3
    assert decider.retry_on == (500, 503)
    assert not decider.uses_predicate


def test_retry_decider_uses_predicate() -> None:
    assert RetryDecider(retries=3, retry_on=Mock(return_value=True)).uses_predicate


#######################################
#     Tests for the default policy     #
#######################################


@pytest.mark.parametrize("status_code", [200, 404, 500, 503])
def test_should_retry_default_never_retries_status(status_code: int) -> None:
    decider = RetryDecider(retries=3, retry_on=None)
    assert not decider.should_retry(0, ok_outcome(status_code))


def test_should_retry_default_retries_transport_error() -> None:
    decider = RetryDecider(retries=3, retry_on=None)
    assert decider.should_retry(0, error_outcome())


##########################################
#     Tests for the status-set policy     #
##########################################


@pytest.mark.parametrize("status_code", [503, 404])
def test_should_retry_status_in_set(status_code: int) -> None:
    decider = RetryDecider(retries=3, retry_on=(503, 404))
    assert decider.should_retry(0, ok_outcome(status_code))


@pytest.mark.parametrize("status_code", [200, 500])
def test_should_retry_status_not_in_set(status_code: int) -> None:
    decider = RetryDecider(retries=3, retry_on=(503, 404))
    assert not decider.should_retry(0, ok_outcome(status_code))


def test_should_retry_status_set_retries_transport_error() -> None:
    decider = RetryDecider(retries=3, retry_on=(503,))
    assert decider.should_retry(2, error_outcome())


def test_should_retry_empty_status_set() -> None:
    decider = RetryDecider(retries=3, retry_on=())
    assert not decider.should_retry(0, ok_outcome(503))
    assert decider.should_retry(0, error_outcome())


####################################
#     Tests for the retry cap     #
####################################


@pytest.mark.parametrize("attempt", [3, 4])
def test_should_retry_cap_reached(attempt: int) -> None:
    decider = RetryDecider(retries=3, retry_on=(503,))
    assert not decider.should_retry(attempt, ok_outcome(503))
    assert not decider.should_retry(attempt, error_outcome())


def test_should_retry_cap_skips_predicate() -> None:
    predicate = Mock(return_value=True)
    decider = RetryDecider(retries=2, retry_on=predicate)
    assert not decider.should_retry(2, ok_outcome())
    predicate.assert_not_called()


def test_should_retry_zero_retries_never_consults_predicate() -> None:
    predicate = Mock(return_value=True)
    decider = RetryDecider(retries=0, retry_on=predicate)
    assert not decider.should_retry(0, error_outcome())
    predicate.assert_not_called()


########################################
#     Tests for the predicate policy     #
########################################


def test_should_retry_predicate_arguments_response() -> None:
    predicate = Mock(return_value=False)
    outcome = ok_outcome(503)
    decider = RetryDecider(retries=3, retry_on=predicate)
    assert not decider.should_retry(1, outcome)
    predicate.assert_called_once_with(1, None, outcome.response)


def test_should_retry_predicate_arguments_error() -> None:
    predicate = Mock(return_value=True)
    outcome = error_outcome()
    decider = RetryDecider(retries=3, retry_on=predicate)
    assert decider.should_retry(0, outcome)
    predicate.assert_called_once_with(0, outcome.error, None)


def test_should_retry_predicate_can_stop_on_transport_error() -> None:
    decider = RetryDecider(retries=3, retry_on=Mock(return_value=False))
    assert not decider.should_retry(0, error_outcome())


def test_should_retry_predicate_can_retry_success() -> None:
    decider = RetryDecider(retries=3, retry_on=Mock(return_value=True))
    assert decider.should_retry(0, ok_outcome(200))


def test_should_retry_predicate_result_is_coerced() -> None:
    decider = RetryDecider(retries=3, retry_on=Mock(return_value=1))
    assert decider.should_retry(0, ok_outcome()) is True


def test_should_retry_predicate_exception_propagates() -> None:
    decider = RetryDecider(retries=3, retry_on=Mock(side_effect=RuntimeError("policy bug")))
    with pytest.raises(RuntimeError, match="policy bug"):
        decider.should_retry(0, ok_outcome())


def test_should_retry_rejects_async_predicate() -> None:
    async def predicate(attempt: int, error: Exception | None, response: httpx.Response | None) -> bool:  # noqa: ARG001
        return True

    decider = RetryDecider(retries=3, retry_on=predicate)
    with pytest.raises(TypeError, match="retry_on returned an awaitable"):
        decider.should_retry(0, ok_outcome())


###########################################
#     Tests for should_retry_async     #
###########################################


@pytest.mark.asyncio
async def test_should_retry_async_status_set() -> None:
    decider = RetryDecider(retries=3, retry_on=(503,))
    assert await decider.should_retry_async(0, ok_outcome(503))
    assert not await decider.should_retry_async(0, ok_outcome(200))
    assert await decider.should_retry_async(0, error_outcome())


@pytest.mark.asyncio
async def test_should_retry_async_sync_predicate() -> None:
    predicate = Mock(return_value=True)
    outcome = ok_outcome()
    decider = RetryDecider(retries=3, retry_on=predicate)
    assert await decider.should_retry_async(0, outcome)
    predicate.assert_called_once_with(0, None, outcome.response)


@pytest.mark.asyncio
@pytest.mark.parametrize("decision", [True, False])
async def test_should_retry_async_async_predicate(decision: bool) -> None:
    predicate = AsyncMock(return_value=decision)
    outcome = error_outcome()
    decider = RetryDecider(retries=3, retry_on=predicate)
    assert await decider.should_retry_async(1, outcome) is decision
    predicate.assert_awaited_once_with(1, outcome.error, None)


@pytest.mark.asyncio
async def test_should_retry_async_predicate_inspects_body() -> None:
    async def predicate(attempt: int, error: Exception | None, response: httpx.Response | None) -> bool:  # noqa: ARG001
        return response.json()["calls"] < 3

    decider = RetryDecider(retries=5, retry_on=predicate)
    assert await decider.should_retry_async(
        0, AttemptOutcome(response=httpx.Response(200, json={"calls": 1}))
    )
    assert not await decider.should_retry_async(
        2, AttemptOutcome(response=httpx.Response(200, json={"calls": 3}))
    )


@pytest.mark.asyncio
async def test_should_retry_async_cap_skips_predicate() -> None:
    predicate = AsyncMock(return_value=True)
    decider = RetryDecider(retries=1, retry_on=predicate)
    assert not await decider.should_retry_async(1, ok_outcome())
    predicate.assert_not_awaited()


@pytest.mark.asyncio
async def test_should_retry_async_predicate_rejection_propagates() -> None:
    decider = RetryDecider(retries=3, retry_on=AsyncMock(side_effect=ValueError("bad body")))
    with pytest.raises(ValueError, match="bad body"):
        await decider.should_retry_async(0, ok_outcome())
