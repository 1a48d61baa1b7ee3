"""Module with a class object which represent record lists."""

__all__ = ["ObjectList"]


class ObjectList(list):
    """List with a default record class used to type it when it is empty.

    Attributes
    ----------
    default : type
        Record class of the list elements
    """

    def __init__(self, object_list, default):
        """Initialize the list and the default value.

        Parameters
        ----------
        object_list : List[object]
            Record list
        default : type
            Record class to use to type the list, if it is empty
        """
        # Initialize the underlying list
        super().__init__(object_list)

        # Store the default record class
        self.default = default

    def find(self, candidate_id):
        """Resolves a weak reference to the record built from a candidate.

        Parameters
        ----------
        candidate_id : int
            ID of the source candidate

        Returns
        -------
        object
            First record whose `candidate_id` matches, `None` if there is none
        """
        if candidate_id < 0:
            return None

        for record in self:
            if getattr(record, "candidate_id", -1) == candidate_id:
                return record

        return None
