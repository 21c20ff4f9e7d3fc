""" Errors raised by nftsim backends """


class NftablesError(Exception):
    """Base class for every error raised by nftsim"""


class NotFoundError(NftablesError):
    """An operation addressed an object that does not exist"""


class UnsupportedOperationError(NftablesError):
    """A verb is not defined for an object kind, or the kind is unknown"""


class PreconditionError(NftablesError):
    """A transaction was built with a fault and cannot be run"""


class ValidationError(PreconditionError):
    """An object is not valid for the requested verb"""


def is_not_found(err: BaseException) -> bool:
    """Check if an error means the target object does not exist"""
    return isinstance(err, NotFoundError)
