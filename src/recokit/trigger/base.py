"""Contains base class of all generator-level event filters."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from recokit.data import GenParticle
from recokit.utils.logger import logger, raise_verbosity


class TriggerBase(ABC):
    """Base class of all generator-level event filters.

    This base class performs the following functions:
      - Counts the number of processed and accepted records
      - Optionally stops accepting records once enough have been accepted
      - Requires every generator event of a record to pass the filter

    An accepted record counts once in `n_good`, however many generator events
    it holds, so the event limit applies to records rather than to events.

    Attributes
    ----------
    name : str
        Name of the trigger as defined in the configuration file
    aliases : Tuple[str]
        Alternative acceptable names for a trigger
    n_events : int
        Number of records processed so far
    n_good : int
        Number of records accepted so far
    """

    # Name of the trigger (as specified in the configuration)
    name = None

    # Alternative allowed names of the trigger
    aliases = ()

    def __init__(
        self,
        threshold: float = 0.0,
        goal_event_number: int = 1000,
        set_event_limit: bool = False,
        verbosity: int = 0,
    ):
        """Initialize the event counters and the event limit.

        Parameters
        ----------
        threshold : float, default 0.
            Transverse momentum threshold (GeV)
        goal_event_number : int, default 1000
            Number of accepted records after which to reject everything, if
            `set_event_limit` is `True`
        set_event_limit : bool, default False
            Whether to stop accepting records once `goal_event_number` of
            them have been accepted
        verbosity : int, default 0
            Verbosity level
        """
        self.threshold = threshold
        self.goal_event_number = goal_event_number
        self.set_event_limit = set_event_limit
        self.verbosity = verbosity
        raise_verbosity(verbosity)

        self.n_events = 0
        self.n_good = 0

    @abstractmethod
    def is_good_event(self, particles: Sequence[GenParticle]) -> bool:
        """Checks whether one generator event passes the filter.

        Parameters
        ----------
        particles : Sequence[GenParticle]
            Particles of the generator event

        Returns
        -------
        bool
            `True` if the event passes the filter
        """
        raise NotImplementedError

    def process(self, events: Sequence[Optional[Sequence[GenParticle]]]) -> bool:
        """Filters one record, which may contain several generator events.

        Parameters
        ----------
        events : Sequence[Sequence[GenParticle]]
            Generator events of the record (e.g. signal and pile-up)

        Returns
        -------
        bool
            `True` if the record must be kept
        """
        self.n_events += 1
        if self.set_event_limit and self.n_good >= self.goal_event_number:
            return False

        good_event = False
        for particles in events:
            if particles is None:
                return False

            good_event = self.is_good_event(particles)
            if not good_event:
                return False

        if good_event:
            self.n_good += 1

        return True

    def __call__(self, events):
        """Alias of :meth:`process`."""
        return self.process(events)

    def reset(self):
        """Resets the event counters."""
        self.n_events = 0
        self.n_good = 0

    def summary(self) -> str:
        """Summarizes the filter decisions so far, and logs it."""
        msg = (
            f"{self.__class__.__name__}: accepted {self.n_good} out of "
            f"{self.n_events} records"
        )
        if self.verbosity > 0:
            logger.info(msg)

        return msg
