"""Module with a parent class of all data structures."""

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    # Attributes specifying coordinates or vectors
    _vec_attrs = ()

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Casts vector attributes to float64 numpy arrays so that all downstream
        numerical routines receive a consistent type.
        """
        for attr in self._vec_attrs:
            setattr(self, attr, np.asarray(getattr(self, attr), dtype=np.float64))

    def __eq__(self, other):
        """Checks that all attributes of two class instances are the same.

        This overloads the default dataclass `__eq__` method to include an
        appopriate check for vector (numpy) attributes.

        Parameters
        ----------
        other : obj
            Other instance of the same object class

        Returns
        -------
        bool
            `True` if all attributes of both objects are identical
        """
        if self.__class__ != other.__class__:
            return False

        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if isinstance(v, np.ndarray):
                if v.shape != v_other.shape or (v_other != v).any():
                    return False
            elif v_other != v:
                return False

        return True
