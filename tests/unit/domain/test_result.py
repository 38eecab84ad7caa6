"""Tests for the ApiResult envelope."""

import pytest

from scrobblekit.domain.entities.status_codes import StatusCode
from scrobblekit.domain.result import ApiResult


class TestApiResultConstruction:
    """Test success/failure constructors."""

    def test_success_carries_data(self) -> None:
        """Test success() sets data, status and http status."""
        result = ApiResult.success({"a": 1}, http_status=200)

        assert result.is_success
        assert result.status == StatusCode.SUCCESS
        assert result.data == {"a": 1}
        assert result.error_message is None
        assert result.http_status == 200

    def test_success_without_data_is_allowed(self) -> None:
        """Test write calls (love, addTags) succeed with data None."""
        result = ApiResult.success(None)
        assert result.is_success
        assert result.data is None

    def test_failure_never_carries_data(self) -> None:
        """Test failure() leaves data None and keeps status/message."""
        result: ApiResult[str] = ApiResult.failure(
            StatusCode.INVALID_PARAMETERS, http_status=400, error_message="Artist not found"
        )

        assert not result.is_success
        assert result.data is None
        assert result.status == StatusCode.INVALID_PARAMETERS
        assert result.http_status == 400
        assert result.error_message == "Artist not found"

    def test_failure_defaults_http_status_to_zero(self) -> None:
        """Test local failures report http status 0."""
        result: ApiResult[str] = ApiResult.failure(StatusCode.NETWORK_ERROR)
        assert result.http_status == 0

    def test_failure_with_success_status_rejected(self) -> None:
        """Test failure(SUCCESS) is a programming error."""
        with pytest.raises(ValueError):
            ApiResult.failure(StatusCode.SUCCESS)

    def test_failed_result_with_data_rejected(self) -> None:
        """Test a non-success status can't be combined with data."""
        with pytest.raises(ValueError):
            ApiResult(data="x", http_status=500, error_message="boom", status=StatusCode.HTTP_ERROR)

    @pytest.mark.parametrize("status", [s for s in StatusCode if s != StatusCode.SUCCESS])
    def test_is_success_iff_status_success(self, status: StatusCode) -> None:
        """Test every non-success status yields is_success False and no data."""
        result: ApiResult[int] = ApiResult.failure(status)
        assert result.is_success is False
        assert result.data is None

    def test_result_is_immutable(self) -> None:
        """Test results are frozen."""
        result = ApiResult.success(1)
        with pytest.raises(AttributeError):
            result.data = 2  # type: ignore[misc]


class TestApiResultMap:
    """Test mapping payloads."""

    def test_map_transforms_success(self) -> None:
        """Test map() applies the function to successful data."""
        result = ApiResult.success(2, http_status=201).map(lambda x: x * 10)
        assert result.data == 20
        assert result.http_status == 201
        assert result.is_success

    def test_map_passes_failure_through(self) -> None:
        """Test map() never calls the function on a failure."""
        failure: ApiResult[int] = ApiResult.failure(StatusCode.RATE_LIMIT_EXCEEDED, 429, "slow down")

        def explode(_: int) -> int:
            raise AssertionError("should not be called")

        mapped = failure.map(explode)
        assert mapped.status == StatusCode.RATE_LIMIT_EXCEEDED
        assert mapped.error_message == "slow down"
        assert mapped.data is None
