from typing import TYPE_CHECKING

from .config import Config
from .errors import (
    NftablesError,
    NotFoundError,
    PreconditionError,
    UnsupportedOperationError,
    ValidationError,
    is_not_found,
)
from .objects import Chain, Element, Map, Rule, Set, Table
from .transaction import Transaction

if TYPE_CHECKING:
    from .backends import BaseBackend


def from_config(configfile: str) -> "BaseBackend":
    """ Create the configured backend, with its configured defines """
    from . import backends

    config = Config(configfile)
    backend = backends.load_backend(config.backend)(config.family, config.table)
    for name, value in config.defines:
        backend.define(name, value)
    return backend

__version__ = '0.1'
__author__ = 'Rick Voormolen'
__email__ = 'rick@voormolen.org'
