from __future__ import annotations


class InvalidConfiguration(ValueError):
    """
    Raised when simulator inputs cannot describe a physical installation.

    Covers unrecognized season or day-type values, inconsistent seasonal
    profiles (e.g. sunrise after sunset, close before open) and negative
    capacities, rates or loads. It is raised once at the boundary where the
    inputs enter the simulator; downstream stages never raise it.
    """
