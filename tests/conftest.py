import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from classiris.dataset import Dataset, Sample, load_iris  # noqa: E402

IRIS_PATH = ROOT / "resources" / "iris.data"


def make_dataset(rows):
    return Dataset(Sample(features, label) for features, label in rows)


@pytest.fixture(scope="session")
def iris():
    return load_iris(str(IRIS_PATH))


@pytest.fixture
def two_points():
    return make_dataset([([0, 0, 0, 0], "A"), ([1, 1, 1, 1], "B")])


@pytest.fixture
def line_xy():
    return make_dataset([([1], "X"), ([2], "X"), ([3], "Y"), ([4], "Y")])
