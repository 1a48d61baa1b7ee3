"""Module with a parent class of all output records."""

from dataclasses import asdict, dataclass

import numpy as np

__all__ = ["DataBase"]


@dataclass(eq=False)
class DataBase:
    """Base class of all output records.

    Each record class declares the layout of its non-scalar attributes so
    that storage backends can persist any record generically.
    """

    # Fixed-length attributes as (key, shape) or (key, (shape, dtype)) pairs
    _fixed_length_attrs = ()

    # Variable-length attributes as (key, dtype) pairs
    _var_length_attrs = ()

    # Nested record attributes as (key, class) pairs. The value is either a
    # single record or a list of records of that class
    _obj_attrs = ()

    # Nested record attributes which hold a single record rather than a list
    _single_obj_attrs = ()

    # Attributes which hold candidate IDs (weak references)
    _index_attrs = ()

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Gives default values to array-like attributes. If a default value was
        provided in the attribute definition, all instances of this class
        would point to the same memory location.
        """
        # Provide default values to the fixed-length array attributes
        for attr, spec in self._fixed_length_attrs:
            shape, dtype = self._parse_shape(spec)
            if getattr(self, attr) is None:
                setattr(self, attr, np.zeros(shape, dtype=dtype))
            else:
                setattr(self, attr, np.array(getattr(self, attr), dtype=dtype))

        # Provide default values to the variable-length array attributes
        for attr, dtype in self._var_length_attrs:
            if getattr(self, attr) is None:
                setattr(self, attr, np.empty(0, dtype=dtype))
            else:
                setattr(self, attr, np.array(getattr(self, attr), dtype=dtype))

        # Provide default values to the nested record attributes
        for attr, cls in self._obj_attrs:
            if getattr(self, attr) is None:
                default = cls() if attr in self.single_obj_attrs else []
                setattr(self, attr, default)

    @staticmethod
    def _parse_shape(spec):
        """Splits a fixed-length attribute specification into (shape, dtype)."""
        if isinstance(spec, tuple) and isinstance(spec[-1], type):
            return spec[0], spec[-1]

        return spec, np.float64

    def __eq__(self, other):
        """Checks that all attributes of two records are the same.

        This overloads the default dataclass `__eq__` method to include an
        appopriate check for vector (numpy) and nested record attributes.

        Parameters
        ----------
        other : obj
            Other instance of the same record class

        Returns
        -------
        bool
            `True` if all attributes of both records are identical
        """
        # Check that the two objects belong to the same class
        if self.__class__ != other.__class__:
            return False

        # Check that all attributes are identical
        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if isinstance(v, np.ndarray):
                if v.shape != v_other.shape or (v_other != v).any():
                    return False

            elif isinstance(v, list):
                if len(v) != len(v_other):
                    return False
                if any(a != b for a, b in zip(v, v_other)):
                    return False

            elif v != v_other:
                return False

        return True

    def as_dict(self):
        """Returns the record as dictionary of (key, value) pairs.

        Nested records are recursively converted to dictionaries.

        Returns
        -------
        dict
            Dictionary of attribute names and their values
        """
        return asdict(self)

    @property
    def fixed_length_attrs(self):
        """Dictionary which maps fixed-length attributes onto their shape."""
        return {k: self._parse_shape(v)[0] for k, v in self._fixed_length_attrs}

    @property
    def var_length_attrs(self):
        """Dictionary which maps variable-length attributes onto their type."""
        return dict(self._var_length_attrs)

    @property
    def obj_attrs(self):
        """Dictionary which maps nested record attributes onto their class."""
        return dict(self._obj_attrs)

    @property
    def single_obj_attrs(self):
        """Nested record attributes which hold a single record."""
        return self._single_obj_attrs

    @property
    def index_attrs(self):
        """List of attributes which hold candidate IDs."""
        return self._index_attrs
