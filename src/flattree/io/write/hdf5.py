"""Module to write the output tree to an HDF5 file."""

import os
from dataclasses import fields

import h5py
import numpy as np

from flattree.version import __version__

from .base import TreeBase

__all__ = ["HDF5Tree"]


class HDF5Tree(TreeBase):
    """Writes the output tree to an HDF5 file.

    Each branch is stored as a compound dataset with one row per record.
    Scalar attributes become scalar fields, fixed-length arrays become
    sub-array fields and weak reference lists become variable-length fields.
    Nested records (e.g. the secondary vertices of a jet) are stored in a
    separate `<branch>.<attribute>` dataset which carries an extra `parent`
    field, the row of the parent record. The number of records of each branch
    in each event is stored in a `<branch>_size` dataset.

    Typical configuration should look like:

    .. code-block:: yaml

        io:
          writer:
            name: hdf5
            file_name: output.h5
    """

    name = "hdf5"

    def __init__(self, file_name="output.h5", overwrite=False):
        """Initialize the basics of the output file.

        Parameters
        ----------
        file_name : str, default 'output.h5'
            Name of the output HDF5 file
        overwrite : bool, default False
            If True, overwrite the output file if it already exists
        """
        # Initialize the underlying tree
        super().__init__()

        # Check that output file does not already exist, if requested
        if not overwrite and os.path.isfile(file_name):
            raise FileExistsError(f"File with name {file_name} already exists.")

        # Open the output file, store the version it was produced with
        self.file_name = file_name
        self.out_file = h5py.File(file_name, "w")
        self.out_file.attrs["version"] = __version__
        self.dtypes = {}

    def new_branch(self, name, record):
        """Creates a new output branch and its datasets.

        Parameters
        ----------
        name : str
            Name of the branch
        record : type
            Record class stored in the branch

        Returns
        -------
        TreeBranch
            Branch handle
        """
        assert self.num_events == 0, "Cannot add branches once events are filled."
        branch = super().new_branch(name, record)

        # If the branch is replaced, drop the datasets of the previous one
        for key in list(self.out_file.keys()):
            if key in (name, f"{name}_size") or key.startswith(f"{name}."):
                del self.out_file[key]
                self.dtypes.pop(key, None)

        # Create the record datasets and the event size dataset
        self.create_datasets(name, record)
        self.out_file.create_dataset(
            f"{name}_size", (0,), maxshape=(None,), dtype=np.int64
        )

        return branch

    def create_datasets(self, key, record, nested=False):
        """Create place holders for the records of one class.

        Parameters
        ----------
        key : str
            Name of the dataset in the file
        record : type
            Record class to store
        nested : bool, default False
            Whether the records are nested in a parent record
        """
        dtype = self.get_object_dtype(record, nested)
        self.dtypes[key] = dtype
        dataset = self.out_file.create_dataset(
            key, (0,), maxshape=(None,), dtype=dtype
        )
        dataset.attrs["class_name"] = record.__name__

        for attr, cls in record._obj_attrs:
            self.create_datasets(f"{key}.{attr}", cls, nested=True)

    @staticmethod
    def get_object_dtype(record, nested=False):
        """Loop over the attributes of a record class to figure out what to
        store.

        Parameters
        ----------
        record : type
            Record class
        nested : bool, default False
            If `True`, prepend a `parent` field

        Returns
        -------
        np.dtype
            Compound data type of the records
        """
        obj = record()
        object_dtype = [("parent", np.int64)] if nested else []
        for field in fields(obj):
            key, val = field.name, getattr(obj, field.name)
            if key in obj.obj_attrs:
                # Nested records are stored in their own dataset
                continue

            elif key in obj.fixed_length_attrs:
                # Fixed-length array of scalars
                object_dtype.append((key, val.dtype, val.shape))

            elif key in obj.var_length_attrs:
                # Variable-length array of scalars
                object_dtype.append((key, h5py.vlen_dtype(val.dtype)))

            elif np.isscalar(val):
                # Scalar. Force bool onto shorts
                dtype = type(val) if not isinstance(val, bool) else np.uint8
                object_dtype.append((key, dtype))

            else:
                raise ValueError(
                    f"Attribute {key} of {record.__name__} has an "
                    f"unrecognized type: {type(val)}"
                )

        return np.dtype(object_dtype)

    def store(self):
        """Appends the records of the current event to the file."""
        for name, branch in self.branches.items():
            self.store_objects(name, branch.record, branch.records)
            self.extend(self.out_file[f"{name}_size"], np.array([len(branch)]))

        self.out_file.flush()

    def store_objects(self, key, record, records, parents=None):
        """Stores a list of records and, recursively, their nested records.

        Parameters
        ----------
        key : str
            Name of the dataset in the file
        record : type
            Record class
        records : List[object]
            Records to store
        parents : List[int], optional
            Row of the parent record of each record, if nested
        """
        # Convert the list of records to an array of storable objects
        dataset = self.out_file[key]
        dtype = self.dtypes[key]
        first_id = len(dataset)
        objects = np.empty(len(records), dtype)
        names = [n for n in dtype.names if n != "parent"]
        for i, obj in enumerate(records):
            for name in names:
                objects[name][i] = getattr(obj, name)
        if parents is not None:
            objects["parent"] = parents

        # Extend the dataset, store array
        self.extend(dataset, objects)

        # Store the nested records, with a reference to their parent row
        for attr, cls in record._obj_attrs:
            children, child_parents = [], []
            for i, obj in enumerate(records):
                value = getattr(obj, attr)
                items = value if isinstance(value, list) else [value]
                children.extend(items)
                child_parents.extend([first_id + i] * len(items))

            self.store_objects(f"{key}.{attr}", cls, children, child_parents)

    @staticmethod
    def extend(dataset, array):
        """Appends an array at the end of a resizable dataset.

        Parameters
        ----------
        dataset : h5py.Dataset
            Dataset to extend
        array : np.ndarray
            Array to append
        """
        if not len(array):
            return

        current_id = len(dataset)
        dataset.resize(current_id + len(array), axis=0)
        dataset[current_id : current_id + len(array)] = array

    def close(self):
        """Closes the output file."""
        if self.out_file:
            self.out_file.close()
