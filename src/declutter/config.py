"""
Package defaults, loaded from the `config.yaml` file shipped alongside this
module.
"""

# std
from pathlib import Path
from dataclasses import dataclass, field

# third-party
import yaml
from loguru import logger


# ---------------------------------------------------------------------------- #
CONFIG_FILE = Path(__file__).with_name('config.yaml')

# ---------------------------------------------------------------------------- #


@dataclass(frozen=True)
class ProximityConfig:
    epsilon: float = 0.5
    max_iterations: int = 50

    def __post_init__(self):
        if not isinstance(self.max_iterations, int) or self.max_iterations < 1:
            raise ValueError(
                f'max_iterations must be a positive integer, got '
                f'{self.max_iterations!r}'
            )


@dataclass(frozen=True)
class SizesConfig:
    smin: float = 2
    k: float = 10

    def __post_init__(self):
        if self.k < self.smin:
            raise ValueError(f'Marker size upper bound k={self.k} is smaller '
                             f'than the floor smin={self.smin}.')


@dataclass(frozen=True)
class Config:
    proximity: ProximityConfig = field(default_factory=ProximityConfig)
    sizes: SizesConfig = field(default_factory=SizesConfig)

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        unknown = set(data) - {'proximity', 'sizes'}
        if unknown:
            raise ValueError(f'Unknown config section(s): {sorted(unknown)}')

        return cls(ProximityConfig(**(data.get('proximity') or {})),
                   SizesConfig(**(data.get('sizes') or {})))


def load_config(path=None):
    """
    Load configuration from a yaml file. Use the package defaults file if
    `path` is not given.
    """
    path = Path(path or CONFIG_FILE)
    logger.debug('Loading config from {}.', path)
    with path.open() as fp:
        return Config.from_dict(yaml.safe_load(fp))


# module config
CONFIG = load_config()
