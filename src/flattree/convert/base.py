"""Module with the base class of all the candidate converters."""

from flattree.math import length_to_time

__all__ = ["ConverterBase"]


class ConverterBase:
    """Base class of all the candidate converters.

    A converter turns the candidates of one input collection into records of
    one output class and appends them to an output branch. By default, one
    record is produced per candidate, in collection order.

    Attributes
    ----------
    name : str
        Name of the output record class, as specified in the configuration
    aliases : Tuple[str]
        Alternative allowed names of the output record class
    record : type
        Output record class
    sort : bool
        Whether the input collection is ordered by decreasing pt first
    singleton : bool
        Whether only the first candidate of the collection is converted
    """

    # Name of the output record class (as specified in the configuration)
    name = ""

    # Alternative allowed names of the output record class
    aliases = ()

    # Output record class
    record = None

    # Whether the input must be ordered by decreasing pt
    sort = False

    # Whether only the first candidate of the collection is converted
    singleton = False

    def __init__(self, sort_in_place=False, check_consistency=True):
        """Initialize the converter.

        Parameters
        ----------
        sort_in_place : bool, default False
            If `True`, sorting converters reorder their input collection in
            place, which is visible to every other consumer of it. Otherwise
            they convert a sorted view and leave the collection untouched.
        check_consistency : bool, default True
            Run the internal consistency checks of the converted records
        """
        self.sort_in_place = sort_in_place
        self.check_consistency = check_consistency

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r})"

    def __call__(self, branch, array):
        """Converts one input collection and appends the records to a branch.

        Parameters
        ----------
        branch : TreeBranch
            Output branch
        array : CandidateArray
            Input candidate collection
        """
        for candidate in self.candidates(array):
            branch.append(self.convert(candidate, array.arena))

    def candidates(self, array):
        """Returns the candidates to convert, in conversion order.

        Parameters
        ----------
        array : CandidateArray
            Input candidate collection

        Returns
        -------
        Iterable[Candidate]
            Candidates to convert
        """
        if self.singleton:
            first = array.first()
            return [first] if first is not None else []

        if self.sort:
            if self.sort_in_place:
                array.sort()
            else:
                return array.sorted()

        return array

    def convert(self, candidate, arena):
        """Converts one candidate into one record.

        Parameters
        ----------
        candidate : Candidate
            Candidate to convert
        arena : CandidateArena
            Arena which owns the candidate and its constituents

        Returns
        -------
        object
            Output record
        """
        raise NotImplementedError("Converters must implement `convert`.")

    @staticmethod
    def reference(candidate):
        """Weak reference to a candidate, `-1` if there is none."""
        return candidate.id if candidate is not None else -1

    @staticmethod
    def time(candidate):
        """Converted time of the position four-vector of a candidate."""
        return length_to_time(candidate.position[3])
