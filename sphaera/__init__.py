"""Public package API for the sphaera geometry toolkit.

This facade provides a stable, flat import surface on top of the internal
implementation package ``sphaera.core`` while deferring the matplotlib-based
plotting module until first use to keep ``import sphaera`` fast.

Example
-------
    from sphaera import WelzlEncloser3D, DoubleEquivalence, EPS_DISTANCE

    encloser = WelzlEncloser3D(DoubleEquivalence.of_epsilon(EPS_DISTANCE))
    ball = encloser.enclose([(0, 0, 0), (2, 0, 0), (1, 1, 0)])

The deeper modules (``sphaera.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound

try:
    __version__ = _pkg_version("sphaera")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import EPS_DISTANCE, EPS_RELATIVE
from .core.errors import (
    SphaeraError, EmptyInputError, NonFiniteCoordinateError, DegenerateConfigurationError,
    PrecisionConfigurationError, EnclosingStateError,
)
from .core.precision import DoubleEquivalence
from .core.points import Point, as_point, as_points
from .core.ball import EnclosingBall
from .core.generators import SupportBallGenerator, HypersphereGenerator, DiskGenerator, SphereGenerator
from .core.encloser import WelzlEncloser, enclose
from .core.facades import WelzlEncloser2D, WelzlEncloser3D, WelzlEncloserND
from .core.spherical import SphericalCoordinates
from .core.config import EncloserConfig
from .core.stats import EncloseStats, format_stats_table
from .core.logging_utils import configure_logging, get_logger


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# matplotlib is only imported when a plot is requested
visualization = _lazy_module('sphaera.core.visualization')


def plot_enclosing_ball(*args, **kwargs):
    return visualization.plot_enclosing_ball(*args, **kwargs)


__all__ = [
    '__version__',
    # tolerances and precision
    'EPS_DISTANCE', 'EPS_RELATIVE', 'DoubleEquivalence',
    # errors
    'SphaeraError', 'EmptyInputError', 'NonFiniteCoordinateError',
    'DegenerateConfigurationError', 'PrecisionConfigurationError', 'EnclosingStateError',
    # value types
    'Point', 'as_point', 'as_points', 'EnclosingBall', 'SphericalCoordinates',
    # generators and engine
    'SupportBallGenerator', 'HypersphereGenerator', 'DiskGenerator', 'SphereGenerator',
    'WelzlEncloser', 'enclose', 'WelzlEncloser2D', 'WelzlEncloser3D', 'WelzlEncloserND',
    # configuration, stats, logging, plotting
    'EncloserConfig', 'EncloseStats', 'format_stats_table',
    'configure_logging', 'get_logger', 'plot_enclosing_ball', 'visualization',
]
