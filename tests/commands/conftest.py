import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patch_context(mocker, compute_mock):
    """Patch init_aws_context in the given module to hand out compute_mock."""

    def _patch(module):
        config_mock = mocker.Mock()
        mocker.patch(
            f"{module}.init_aws_context",
            return_value=(config_mock, compute_mock),
        )
        return compute_mock

    return _patch
