# third-party
import pytest

# local
from declutter import CONFIG, load_config
from declutter.config import Config


# ---------------------------------------------------------------------------- #

def test_defaults():
    assert CONFIG.proximity.epsilon == 0.5
    assert CONFIG.proximity.max_iterations == 50
    assert CONFIG.sizes.smin == 2
    assert CONFIG.sizes.k == 10


def test_load_partial(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('proximity:\n    epsilon: 1.5\n')
    config = load_config(path)

    assert config.proximity.epsilon == 1.5
    assert config.proximity.max_iterations == 50
    assert config.sizes == CONFIG.sizes


def test_load_empty(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert load_config(path) == Config()


@pytest.mark.parametrize(
    'data',
    [{'proximity': {'max_iterations': 0}},
     {'proximity': {'max_iterations': 2.5}},
     {'sizes': {'smin': 5, 'k': 1}},
     {'plotting': {}}]
)
def test_invalid_values(data):
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_unknown_option():
    # unknown keys within a section are rejected by the dataclass constructor
    with pytest.raises(TypeError, match='tolerance'):
        Config.from_dict({'proximity': {'tolerance': 1}})
