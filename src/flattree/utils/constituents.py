"""Flattening of nested candidate constituents down to leaf objects."""

from flattree.errors import ConstituentDepthError

__all__ = ["flatten_constituents"]


def flatten_constituents(candidate, arena):
    """Resolves the constituents of a candidate down to leaf candidates.

    Each direct constituent is resolved according to its nesting depth:

    - no constituent of its own: it is a leaf (e.g. a particle);
    - its first constituent is a leaf: that constituent is kept, which
      resolves a track to the particle it originates from;
    - otherwise it holds intermediate items (e.g. a tower made of tracks)
      whose first constituent is a leaf: one leaf is kept per item.

    The output follows the order of the constituent lists. Candidates reached
    through several paths appear several times.

    Parameters
    ----------
    candidate : Candidate
        Composite candidate (tower, photon, jet, etc.)
    arena : CandidateArena
        Arena which owns the candidate and its constituents

    Returns
    -------
    List[Candidate]
        Leaf constituents

    Raises
    ------
    ConstituentDepthError
        If a constituent chain is deeper than the three supported levels, or
        mixes leaves and nested items below an intermediate candidate
    """
    leaves = []
    for sub in arena.constituents(candidate):
        # Particle
        if sub.is_leaf:
            leaves.append(sub)
            continue

        # Track
        first = arena.first_constituent(sub)
        if first.is_leaf:
            leaves.append(first)
            continue

        # Tower
        for item in arena.constituents(sub):
            leaf = arena.first_constituent(item)
            if leaf is None:
                raise ConstituentDepthError(
                    f"Constituent {item.id} of candidate {sub.id} (itself a "
                    f"constituent of candidate {candidate.id}) is a leaf, "
                    f"but the first constituent of candidate {sub.id} is not. "
                    "Leaves and nested items cannot be mixed at this level."
                )
            if not leaf.is_leaf:
                raise ConstituentDepthError(
                    f"Constituent {sub.id} of candidate {candidate.id} is "
                    f"nested {arena.depth(sub)} levels deep, at most 2 are "
                    "supported."
                )
            leaves.append(leaf)

    return leaves
