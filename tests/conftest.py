import pytest
from loguru import logger

from mlopsroi.models import InputRecord


@pytest.fixture
def default_inputs() -> InputRecord:
    """The startup snapshot used by the calculator."""
    return InputRecord()


@pytest.fixture
def zero_investment(default_inputs: InputRecord) -> InputRecord:
    return default_inputs.model_copy(
        update={"platform_subscription": 0.0, "implementation_cost": 0.0, "training_cost": 0.0}
    )


@pytest.fixture(autouse=True)
def _drop_log_sinks():
    yield
    logger.remove()
    logger.disable("mlopsroi")
