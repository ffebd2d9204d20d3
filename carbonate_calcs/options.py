import numbers

OPTIONS = {
    "real_root_rtol": 1e-6,
    "pH_bounds": (0.0, 14.0),
    "warn_for_range": True,
}  # defaults


def _valid_rtol(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and value > 0


def _valid_bounds(value):
    try:
        lo, hi = value
    except (TypeError, ValueError):
        return False
    return lo < hi


_VALIDATORS = {
    "real_root_rtol": _valid_rtol,
    "pH_bounds": _valid_bounds,
    "warn_for_range": lambda choice: choice in [True, False],
}


class set_options:
    """
    Set options for ``carbonate_calcs`` in a controlled context.

    Args:
        ``real_root_rtol`` : float, default ``1e-6``
            A root of the [H+] polynomial counts as real when
            ``abs(root.imag) <= real_root_rtol * abs(root)``.
        ``pH_bounds`` : (float, float), default ``(0.0, 14.0)``
            Plausible pH interval for a root-found [H+]. Roots outside it
            raise :py:class:`~carbonate_calcs.exceptions.NumericalDivergenceError`.
        ``warn_for_range`` : {``True``, ``False``}, default ``True``
            Issue :py:class:`~carbonate_calcs.exceptions.RangeWarning` when
            temperature or salinity leave the validity range of the constants.

    ``OPTIONS`` is a single module-level dict, so a change made here, even
    inside a ``with`` block, is seen by every thread of the process. To run
    samples in parallel with different settings use separate processes.

    Examples:

        As a context manager::

            with set_options(warn_for_range=False):
                solve_alk_DIC(25.0, 0.0, 800.0, 780.0)

        Or to set global options::

            set_options(pH_bounds=(2.0, 12.0))
    """

    def __init__(self, **kwargs):
        self.old = {}
        for k, v in kwargs.items():
            if k not in OPTIONS:
                raise ValueError(
                    "argument name %r is not in the set of valid options %r"
                    % (k, set(OPTIONS))
                )
            if not _VALIDATORS[k](v):
                raise ValueError(f"option {k!r} given an invalid value: {v!r}.")
            self.old[k] = OPTIONS[k]
        self._apply_update(kwargs)

    def _apply_update(self, options_dict):
        if "pH_bounds" in options_dict:
            options_dict = dict(options_dict)
            options_dict["pH_bounds"] = tuple(float(b) for b in options_dict["pH_bounds"])
        OPTIONS.update(options_dict)

    def __enter__(self):
        return

    def __exit__(self, type, value, traceback):
        self._apply_update(self.old)
