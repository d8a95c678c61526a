from .sample import Sample, Dataset
from .iris import IRIS_COLUMNS, iris_data_path, load_iris
