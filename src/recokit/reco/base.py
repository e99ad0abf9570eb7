"""Contains base class of all reconstruction algorithms."""

from abc import ABC

from recokit.utils.logger import logger, raise_verbosity


class RecoBase(ABC):
    """Base class of all reconstruction algorithms.

    Reconstruction algorithms are configured once and then called on
    independent inputs (tracks, hits). They hold no mutable state beyond
    their configuration.

    Attributes
    ----------
    name : str
        Name of the algorithm as defined in the configuration file
    aliases : Tuple[str]
        Alternative acceptable names for an algorithm
    verbosity : int
        Verbosity level of the diagnostic messages
    """

    # Name of the algorithm (as specified in the configuration)
    name = None

    # Alternative allowed names of the algorithm
    aliases = ()

    # Units in which the algorithm expects positions to be expressed in
    units = "cm"

    def __init__(self, verbosity=0):
        """Initialize default algorithm properties.

        Parameters
        ----------
        verbosity : int, default 0
            Verbosity level. Diagnostic messages are only emitted when the
            level is at least as high as the message level.
        """
        self.verbosity = verbosity
        raise_verbosity(verbosity)

    def set_verbosity(self, verbosity):
        """Sets the verbosity level of the diagnostic messages."""
        self.verbosity = verbosity
        raise_verbosity(verbosity)

    def debug(self, level, msg, *args):
        """Emits a diagnostic message if the verbosity is high enough.

        Parameters
        ----------
        level : int
            Minimum verbosity level needed to emit the message
        msg : str
            Message format string
        *args : list
            Arguments of the format string
        """
        if self.verbosity >= level:
            logger.info(f"{self.__class__.__name__}: " + msg, *args)
