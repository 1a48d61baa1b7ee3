"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import numpy as np
import pytest

from flattree.candidate import (
    DisplacedVertex,
    EventStore,
    TruthVertexInfo,
    VertexSummary,
    VertexTrack,
)
from flattree.io import MemoryTree


@pytest.fixture(name="store")
def fixture_store():
    """Empty event store."""
    return EventStore()


@pytest.fixture(name="tree")
def fixture_tree():
    """Empty in-memory output tree."""
    return MemoryTree()


@pytest.fixture(name="event")
def fixture_event(store):
    """Populates the event store with a small but complete event.

    The constituent hierarchy follows the upstream pipeline: particles are
    leaves, tracks are built from one particle, towers from particles or
    tracks, and the reconstructed objects from tracks and towers.

    Parameters
    ----------
    store : EventStore
        Empty event store

    Returns
    -------
    dict
        Candidates of the event, by collection name
    """
    new = store.new_candidate

    # Generator-level particles
    p_mu = new(pid=13, status=1, charge=-1, mass=0.1057,
               momentum=[30.0, 40.0, 0.0, 50.0], position=[0.0, 0.0, 1.0, 3.0])
    p_pi = new(pid=211, status=1, charge=1, mass=0.1396,
               momentum=[3.0, 4.0, 12.0, 13.0], position=[0.1, 0.2, 0.3, 0.0])
    p_gam = new(pid=22, status=1, momentum=[0.0, 10.0, 0.0, 10.0])
    p_el = new(pid=11, status=1, charge=-1, momentum=[20.0, 0.0, 0.0, 20.0])
    particles = store.export_array("Delphes/allParticles")
    particles.extend([p_mu, p_pi, p_gam, p_el])

    # Tracks, each built from one particle
    trk_par = [0.01, 0.5, 0.9, 1.2, 0.02]
    t_mu = new(momentum=p_mu.momentum, position=[600.0, 800.0, 0.0, 1.0e3],
               candidates=[p_mu.id], charge=-1, pid=13,
               dxy=0.01, zd=0.5, trk_par=trk_par)
    t_pi = new(momentum=p_pi.momentum, position=[300.0, 400.0, 1200.0, 0.0],
               candidates=[p_pi.id], charge=1, pid=211,
               dxy=0.01, zd=0.5, trk_par=trk_par)
    tracks = store.export_array("TrackMerger/tracks")
    tracks.extend([t_mu, t_pi])

    # Towers, one from a particle, one from tracks
    w_gam = new(momentum=[0.0, 10.0, 0.0, 10.0], position=[0.0, 0.0, 0.0, 2.0],
                candidates=[p_gam.id], eem=9.0, ehad=1.0,
                edges=[-0.1, 0.1, 1.5, 1.6], n_time_hits=2)
    w_trk = new(momentum=[3.0, 4.0, 12.0, 13.0], candidates=[t_pi.id],
                eem=2.0, ehad=8.0)
    towers = store.export_array("Calorimeter/towers")
    towers.extend([w_gam, w_trk])

    # Reconstructed objects
    photon = new(momentum=[0.0, 10.0, 0.0, 10.0], candidates=[w_gam.id],
                 eem=9.0, ehad=1.0, isolation_var=0.1, sum_pt=2.0)
    photons = store.export_array("PhotonIsolation/photons")
    photons.append(photon)

    electron = new(momentum=[20.0, 0.0, 0.0, 20.0], candidates=[p_el.id],
                   charge=-1, eem=20.0, ehad=1.0)
    electrons = store.export_array("ElectronIsolation/electrons")
    electrons.append(electron)

    muon = new(momentum=p_mu.momentum, candidates=[t_mu.id], charge=-1)
    muons = store.export_array("MuonIsolation/muons")
    muons.append(muon)

    jet = new(momentum=[3.0, 14.0, 12.0, 30.0], candidates=[w_gam.id, w_trk.id],
              area=0.5, flavor=5, btag=1, n_charged=1, n_neutrals=1,
              frac_pt=[0.5, 0.3, 0.1, 0.1, 0.0], subjets=[w_gam.id],
              tracks=[t_pi.id])
    jet.primary_vertex_tracks.append(VertexTrack(weight=1.0, d0=0.01))
    jet.secondary_vertices.append(
        DisplacedVertex(
            position=np.array([1.0, 2.0, 3.0]), lxy=2.2, n_tracks=1,
            tracks_along_jet=[VertexTrack(weight=0.5, d0=0.3, z0=0.4)],
        )
    )
    jet.hl_svx = VertexSummary(n_vertices=1, n_tracks=1, mass=1.8)
    jet.truth_vertices.append(TruthVertexInfo(x=1.0, y=2.0, z=3.0, pdg_id=511))
    jets = store.export_array("UniqueObjectFinder/jets")
    jets.append(jet)

    # Event-level quantities
    met = new(momentum=[3.0, 4.0, 0.0, 5.0])
    store.export_array("MissingET/momentum").append(met)
    ht = new(momentum=[60.0, 80.0, 0.0, 100.0])
    store.export_array("ScalarHT/energy").append(ht)
    weight = new(momentum=[0.0, 0.0, 0.0, 0.75])
    store.export_array("Weight/weight").append(weight)
    rho_c = new(momentum=[0.0, 0.0, 0.0, 12.0], edges=[0.0, 2.5, 0.0, 0.0])
    rho_f = new(momentum=[0.0, 0.0, 0.0, 4.0], edges=[2.5, 5.0, 0.0, 0.0])
    store.export_array("Rho/rho").extend([rho_c, rho_f])

    return {
        "particles": [p_mu, p_pi, p_gam, p_el],
        "tracks": [t_mu, t_pi],
        "towers": [w_gam, w_trk],
        "photon": photon,
        "electron": electron,
        "muon": muon,
        "jet": jet,
    }
