"""
Hydrogen-ion concentration from a pair of known carbonate-system quantities.

When pH is one of the knowns, h = 10^-pH. Otherwise the charge balance is
multiplied out into a polynomial in h (degree 4 for ALK with CO2 or pCO2,
degree 5 for ALK with DIC) and the physical root is the maximum real root:
spurious real roots are negative or far smaller than seawater [H+].

Inputs and outputs are in mol/kg and atm.
"""
import logging

import numpy as np

from .constants import CASES, PH_CASES
from .equilibrium import equilibrium_constants
from .exceptions import InvalidInputError, NumericalDivergenceError
from .options import OPTIONS
from .speciation import co2_from_pco2
from .units import h_to_pH, pH_to_h

logger = logging.getLogger(__name__)


def alk_co2_polynomial(alk, s, consts):
    """Coefficients (highest degree first) of the ALK + CO2(aq) quartic."""
    Kw, K1, K2, Kb, bor = consts.Kw, consts.K1, consts.K2, consts.Kb, consts.borate_total
    p4 = 1.0
    p3 = Kb + alk
    p2 = alk * Kb - s * K1 - Kb * bor - Kw
    p1 = -s * Kb * K1 - s * 2.0 * K1 * K2 - Kw * Kb
    p0 = -2.0 * s * Kb * K1 * K2
    return [p4, p3, p2, p1, p0]


def alk_dic_polynomial(alk, dic, consts):
    """Coefficients (highest degree first) of the ALK + DIC quintic."""
    Kw, K1, K2, Kb, bor = consts.Kw, consts.K1, consts.K2, consts.Kb, consts.borate_total
    p5 = -1.0
    p4 = -alk - Kb - K1
    p3 = dic * K1 - alk * (Kb + K1) + Kb * bor + Kw - Kb * K1 - K1 * K2
    p2 = (dic * (Kb * K1 + 2.0 * K1 * K2) - alk * (Kb * K1 + K1 * K2) + Kb * bor * K1
          + (Kw * Kb + Kw * K1 - Kb * K1 * K2))
    p1 = (2.0 * dic * Kb * K1 * K2 - alk * Kb * K1 * K2 + Kb * bor * K1 * K2
          + (Kw * Kb * K1 + Kw * K1 * K2))
    p0 = Kw * Kb * K1 * K2
    return [p5, p4, p3, p2, p1, p0]


def max_real_root(coeffs):
    """Largest real root of a polynomial, checked to be a plausible [H+].

    Complex roots are discarded: a root is real when its imaginary part is
    within ``OPTIONS["real_root_rtol"]`` of its modulus.
    """
    try:
        roots = np.roots(coeffs)
    except np.linalg.LinAlgError as e:
        raise NumericalDivergenceError(
            f"Root finding failed for coefficients {list(coeffs)}: {e}"
        ) from e

    rtol = OPTIONS["real_root_rtol"]
    real_roots = roots[np.abs(roots.imag) <= rtol * np.abs(roots)].real
    if real_roots.size == 0:
        raise NumericalDivergenceError(
            f"Polynomial has no real root; roots found: {roots}"
        )

    h = real_roots.max()
    if not h > 0:
        raise NumericalDivergenceError(
            f"Maximum real root {h!r} is not a positive hydrogen-ion concentration."
        )
    pH = h_to_pH(h)
    lo, hi = OPTIONS["pH_bounds"]
    if not lo <= pH <= hi:
        raise NumericalDivergenceError(
            f"Selected root gives pH {pH:.4f}, outside the plausible range {lo}-{hi}."
        )
    return float(h)


def _solve_polynomial(case, coeffs):
    # Broadcast the coefficients so array inputs are solved sample by sample
    coeffs = np.broadcast_arrays(*[np.asarray(c, dtype=float) for c in coeffs])
    shape = coeffs[0].shape
    h = np.empty(shape)
    for idx in np.ndindex(shape):
        h[idx] = max_real_root([c[idx] for c in coeffs])
    logger.debug(
        f"{case}: degree {len(coeffs) - 1} polynomial solved for {h.size} "
        f"sample(s), h = {h}"
    )
    return h[()] if h.ndim == 0 else h


def solve_h(case, TC, S, known_a, known_b, consts=None):
    """Hydrogen-ion concentration (mol/kg) for a known-pair case.

    case : one of 'alk_pCO2', 'alk_CO2', 'alk_DIC', 'pH_CO2', 'pH_pCO2',
           'pH_DIC', 'pH_alk'
    known_a, known_b : the two knowns in case order (ALK or pH first), in
           mol/kg, atm or pH units
    consts : precomputed EquilibriumConstants for (TC, S), optional
    """
    if case not in CASES:
        raise InvalidInputError(f"Unknown case {case!r}; valid cases are {CASES}")

    if case in PH_CASES:
        return pH_to_h(known_a)

    if consts is None:
        consts = equilibrium_constants(TC, S)

    alk = known_a
    if case == 'alk_pCO2':
        coeffs = alk_co2_polynomial(alk, co2_from_pco2(known_b, consts), consts)
    elif case == 'alk_CO2':
        coeffs = alk_co2_polynomial(alk, known_b, consts)
    else:
        coeffs = alk_dic_polynomial(alk, known_b, consts)
    return _solve_polynomial(case, coeffs)
