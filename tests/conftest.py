import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

PathSeries = importlib.import_module('loadpath.series.path_series').PathSeries
channel = importlib.import_module('loadpath.transfer.channel')


@pytest.fixture
def triangle():
    """Samples [0, 2, 4, 2, 0], unit step, no offset, factor 1."""
    return PathSeries(1, [0.0, 2.0, 4.0, 2.0, 0.0], time_increment=1.0)


@pytest.fixture
def datastore():
    return channel.MemoryDatastore()


@pytest.fixture
def pipe():
    return channel.MemoryPipe()


@pytest.fixture
def record_series(datastore):
    """Populated series whose header tag comes from the datastore."""
    return PathSeries(
        7,
        [0.0, 0.5, -1.25, 3.0, 2.0, 0.125],
        time_increment=0.02,
        factor=9.81,
        use_last=True,
        start_time=0.3,
        db_tag=datastore.get_db_tag(),
    )
