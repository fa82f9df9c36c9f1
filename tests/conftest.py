from typing import Dict

import pytest


@pytest.fixture
def environ() -> Dict[str, str]:
    """Fake environment table; pass ``environ.get`` as the lookup."""
    return {}
