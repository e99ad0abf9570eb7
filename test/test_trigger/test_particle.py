"""Tests for the generator-level particle trigger."""

import pytest

from recokit.trigger import ParticleTrigger, trigger_factory


class TestParticleCuts:
    """Test the kinematic cuts applied to single particles."""

    def test_no_species(self, particle):
        """Test that every event passes when no species is requested."""
        trigger = ParticleTrigger()

        assert trigger.is_good_event([])
        assert trigger.is_good_event([particle(211, 1.0, eta=3.0)])

    def test_default_eta(self, particle):
        """Test the default pseudorapidity acceptance."""
        trigger = ParticleTrigger(particles=[211])

        assert trigger.is_good_event([particle(211, 2.0, eta=0.5)])
        assert trigger.is_good_event([particle(211, 2.0, eta=-1.05)])
        assert not trigger.is_good_event([particle(211, 2.0, eta=2.0)])

        trigger.set_cut("eta")
        assert trigger.is_good_event([particle(211, 2.0, eta=2.0)])

    def test_antiparticle(self, particle):
        """Test that species are matched on the absolute PDG code."""
        trigger = ParticleTrigger(particles=[-211])
        assert trigger.is_good_event([particle(211, 2.0)])

        trigger = ParticleTrigger(particles=[211])
        assert trigger.is_good_event([particle(-211, 2.0)])

    def test_threshold(self, particle):
        """Test that a nonzero threshold sets the transverse momentum cut."""
        trigger = ParticleTrigger(threshold=1.5, particles=[13])

        assert trigger.cuts["pt"] == (1.5, None)
        assert not trigger.is_good_event([particle(13, 1.0)])
        assert trigger.is_good_event([particle(13, 2.0)])

        trigger = ParticleTrigger(threshold=1.5, pt_low=0.5, particles=[13])
        assert trigger.is_good_event([particle(13, 1.0)])

    def test_pt_window(self, particle):
        """Test the transverse momentum bounds."""
        trigger = ParticleTrigger(particles=[11], pt_low=1.0, pt_high=5.0)

        assert not trigger.is_good_event([particle(11, 0.5)])
        assert trigger.is_good_event([particle(11, 3.0)])
        assert not trigger.is_good_event([particle(11, 6.0)])

    def test_abs_eta(self, particle):
        """Test the absolute pseudorapidity bounds."""
        trigger = ParticleTrigger(
            particles=[22], eta_low=None, eta_high=None, abs_eta_low=0.5, abs_eta_high=2.0
        )

        assert trigger.is_good_event([particle(22, 1.0, eta=-0.8)])
        assert trigger.is_good_event([particle(22, 1.0, eta=1.5)])
        assert not trigger.is_good_event([particle(22, 1.0, eta=0.2)])
        assert not trigger.is_good_event([particle(22, 1.0, eta=-2.5)])

    def test_p_and_pz(self, particle):
        """Test the total and longitudinal momentum bounds."""
        trigger = ParticleTrigger(particles=[2212], eta_high=None, p_low=10.0)
        assert not trigger.is_good_event([particle(2212, 5.0, eta=0.5)])
        assert trigger.is_good_event([particle(2212, 5.0, eta=1.5)])

        trigger = ParticleTrigger(particles=[2212], pz_high=0.0)
        assert trigger.is_good_event([particle(2212, 5.0, eta=-0.5)])
        assert not trigger.is_good_event([particle(2212, 5.0, eta=0.5)])

    def test_set_cut_bounds(self):
        """Test that one bound can be changed without the other."""
        trigger = ParticleTrigger()

        trigger.set_cut_low("pt", 2.0)
        trigger.set_cut_high("pt", 10.0)
        trigger.set_cut_low("eta", -0.5)

        assert trigger.cuts["pt"] == (2.0, 10.0)
        assert trigger.cuts["eta"] == (-0.5, 1.1)

    def test_unknown_variable(self):
        """Test that unknown kinematic variables are rejected."""
        with pytest.raises(ValueError):
            ParticleTrigger().set_cut("energy", 1.0)

    def test_stable_only(self, particle):
        """Test that only final-state particles are considered by default."""
        decayed = particle(111, 2.0, status=2)

        assert not ParticleTrigger(particles=[111]).is_good_event([decayed])
        assert ParticleTrigger(particles=[111], stable_only=False).is_good_event(
            [decayed]
        )

    def test_several_species(self, particle):
        """Test that every requested species must be present."""
        trigger = ParticleTrigger()
        trigger.add_particle(11)
        trigger.add_particles([13])
        electron, muon = particle(11, 2.0), particle(13, 2.0)

        assert trigger.particle_counts([electron, electron]) == [2, 0]
        assert not trigger.is_good_event([electron])
        assert trigger.is_good_event([electron, muon])


class TestParentSelection:
    """Test the requirement on the species a particle was produced by."""

    def test_parent_required(self, particle):
        """Test that only particles from a requested parent are counted."""
        trigger = ParticleTrigger(particles=[13], parents=[23])

        assert trigger.is_good_event([particle(13, 2.0, parents=[23])])
        assert trigger.is_good_event([particle(-13, 2.0, parents=[-23])])
        assert not trigger.is_good_event([particle(13, 2.0, parents=[211])])
        assert not trigger.is_good_event([particle(13, 2.0)])

    def test_several_parents(self, particle):
        """Test that any of the requested parents is accepted."""
        trigger = ParticleTrigger(particles=[11])
        trigger.add_parent(23)
        trigger.add_parents([-24, 443])

        assert trigger.parents == [23, -24, 443]
        assert trigger.is_good_event([particle(11, 2.0, parents=[24])])
        assert trigger.is_good_event([particle(11, 2.0, parents=[21, 443])])
        assert not trigger.is_good_event([particle(11, 2.0, parents=[22])])

    def test_parent_and_cuts(self, particle):
        """Test that the parent requirement adds to the kinematic cuts."""
        trigger = ParticleTrigger(particles=[13], parents=[23], pt_low=5.0)
        event = [particle(13, 2.0, parents=[23]), particle(13, 8.0, parents=[211])]

        assert not trigger.is_good_event(event)
        assert trigger.particle_counts(event) == [0]

        event.append(particle(13, 8.0, parents=[23]))
        assert trigger.is_good_event(event)

    def test_factory(self, particle):
        """Test the parent species given through a configuration block."""
        trigger = trigger_factory(
            "particle_trigger", {"particles": [211], "parents": [3122]}
        )

        assert trigger.parents == [3122]
        assert trigger.process([[particle(211, 1.0, parents=[3122])]])
        assert not trigger.process([[particle(211, 1.0, parents=[310])]])


class TestEventCounting:
    """Test the processing of full records."""

    def test_counters(self, particle):
        """Test the processed and accepted record counters."""
        trigger = ParticleTrigger(particles=[211])

        assert trigger.process([[particle(211, 2.0)]])
        assert not trigger.process([[particle(321, 2.0)]])
        assert trigger([[particle(211, 2.0)]])

        assert trigger.n_events == 3
        assert trigger.n_good == 2
        assert "accepted 2 out of 3" in trigger.summary()

        trigger.reset()
        assert trigger.n_events == trigger.n_good == 0

    def test_all_sub_events(self, particle):
        """Test that every sub-event of a record must pass."""
        trigger = ParticleTrigger(particles=[211])
        good, bad = [particle(211, 2.0)], [particle(321, 2.0)]

        assert trigger.process([good, good])
        assert not trigger.process([good, bad])
        assert not trigger.process([good, None])
        assert trigger.n_good == 1

    def test_empty_record(self):
        """Test that an empty record is kept but not counted as good."""
        trigger = ParticleTrigger(particles=[211])

        assert trigger.process([])
        assert trigger.n_events == 1
        assert trigger.n_good == 0

    def test_event_limit(self, particle):
        """Test that records are rejected once enough have been accepted."""
        trigger = ParticleTrigger(goal_event_number=2, set_event_limit=True)
        event = [[particle(211, 2.0)]]

        assert trigger.process(event)
        assert trigger.process(event)
        assert not trigger.process(event)
        assert trigger.n_good == 2
        assert trigger.n_events == 3

    def test_factory(self, particle):
        """Test the construction from a configuration block."""
        trigger = trigger_factory(
            "particle_trigger", {"particles": [13], "pt_low": 1.0, "verbosity": 1}
        )

        assert isinstance(trigger, ParticleTrigger)
        assert trigger.particles == [13]
        assert trigger.verbosity == 1
        assert trigger.is_good_event([particle(-13, 2.0)])
