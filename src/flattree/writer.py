"""Dispatcher which fills the output tree once per event."""

from copy import deepcopy

from flattree.io import MemoryTree, writer_factory
from flattree.registry import BranchRegistry
from flattree.utils.logger import logger
from flattree.utils.stopwatch import StopwatchManager

__all__ = ["TreeWriter"]


class TreeWriter:
    """Converts the candidate collections of an event into output records.

    The branch registry is built once, when the writer is initialized. Each
    call to :meth:`process` runs the converter of every registered branch,
    in configuration order, then fills the output tree.

    Typical configuration should look like:

    .. code-block:: yaml

        tree_writer:
          branch:
            - [Delphes/allParticles, Particle, GenParticle]
            - [TrackMerger/tracks, Track, Track]
            - [UniqueObjectFinder/jets, Jet, Jet]
          check_consistency: true
          sort_in_place: false
          profile: false
        io:
          writer:
            name: hdf5
            file_name: output.h5
    """

    def __init__(
        self,
        branch,
        store,
        tree,
        check_consistency=True,
        sort_in_place=False,
        profile=False,
        verbosity=None,
    ):
        """Initialize the writer and build its branch registry.

        Parameters
        ----------
        branch : List[Union[str, List[str]]]
            List of (input collection, output branch, output class) triples
        store : EventStore
            Event store which publishes the input collections
        tree : TreeBase
            Output tree
        check_consistency : bool, default True
            Run the internal consistency checks of the converted records
        sort_in_place : bool, default False
            If `True`, the converters which order their input by decreasing
            pt reorder the shared input collection itself
        profile : bool, default False
            Time the conversion of each branch
        verbosity : str, optional
            Logging level of the package logger (e.g. 'info', 'warning')
        """
        # Set the verbosity of the logger
        if verbosity is not None:
            logger.setLevel(verbosity.upper())

        # Store the basic attributes
        self.store = store
        self.tree = tree
        self.profile = profile

        # Bind each branch to its converter and input collection
        self.registry = BranchRegistry.build(
            branch,
            store,
            tree,
            sort_in_place=sort_in_place,
            check_consistency=check_consistency,
        )
        logger.info(
            "Writing %d branch(es): %s", len(self.registry), list(self.registry)
        )

        # Initialize the stopwatches, if requested
        self.watch = StopwatchManager()
        if self.profile:
            self.watch.initialize(list(self.registry))

    @classmethod
    def from_config(cls, cfg, store, tree=None):
        """Builds a writer from a full configuration dictionary.

        Parameters
        ----------
        cfg : dict
            Configuration with a `tree_writer` block and, optionally, an
            `io.writer` block which specifies the output tree
        store : EventStore
            Event store which publishes the input collections
        tree : TreeBase, optional
            Output tree. If not specified, it is built from the `io.writer`
            block, or kept in memory if there is none

        Returns
        -------
        TreeWriter
            Initialized writer
        """
        cfg = deepcopy(cfg)
        writer_cfg = cfg.get("tree_writer", {})
        assert "branch" in writer_cfg, (
            "The `tree_writer` configuration block must specify a `branch` list."
        )

        if tree is None:
            io_cfg = cfg.get("io", {})
            if "writer" in io_cfg:
                tree = writer_factory(io_cfg["writer"])
            else:
                tree = MemoryTree()

        return cls(store=store, tree=tree, **writer_cfg)

    def __len__(self):
        return len(self.registry)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def process(self):
        """Converts the current event and fills the output tree.

        Raises
        ------
        TrackConsistencyError
            If a converted track fails its consistency check
        ConstituentDepthError
            If a constituent chain cannot be resolved to leaf candidates
        """
        try:
            for name, entry in self.registry.items():
                if self.profile:
                    self.watch.start(name)

                try:
                    entry.process()
                finally:
                    if self.profile:
                        self.watch.stop(name)

        except Exception:
            # Records of the branches converted before the failure are dropped
            self.tree.discard()
            raise

        self.tree.fill()

    def log_times(self):
        """Logs the total conversion time of each branch.

        Returns
        -------
        Dict[str, Time]
            Total time spent converting each branch so far
        """
        if not self.profile:
            logger.warning("Branch profiling is disabled, no time to report.")
            return {}

        times = self.watch.times_sum()
        width = max(len(name) for name in times) if times else 0
        msg = f"Conversion time over {self.tree.num_events} event(s):"
        for name, time in times.items():
            msg += f"\n  - {name:<{width}} : {time.wall:0.6f} s"
            msg += f" (CPU: {time.cpu:0.6f} s)"
        logger.info(msg)

        return times

    def close(self):
        """Finalizes the output tree."""
        if self.profile:
            self.log_times()

        self.tree.close()
