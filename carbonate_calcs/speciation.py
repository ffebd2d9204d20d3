"""
Partitioning of the carbonate system at known [H+].

Everything here is in mol/kg (and atm for gas-phase quantities). `h` is the
total-scale hydrogen-ion concentration; `s` is aqueous CO2.
"""
from collections import namedtuple

from .exceptions import InvalidInputError

Speciation = namedtuple('Speciation', ['dic', 'co2', 'hco3', 'co3'])


def co2_from_dic(h, dic, K1, K2):
    return dic / (1.0 + K1 / h + K1 * K2 / h / h)

def dic_from_co2(h, s, K1, K2):
    return s * (1.0 + K1 / h + K1 * K2 / h / h)

def bicarbonate(h, dic, K1, K2):
    return dic / (1.0 + h / K1 + K2 / h)

def carbonate(h, dic, K1, K2):
    return dic / (1.0 + h / K2 + h * h / K1 / K2)


def alkalinity(h, s, consts):
    """Total alkalinity from aqueous CO2: carbonate, borate and water terms."""
    K1, K2 = consts.K1, consts.K2
    return (s * (K1 / h + 2.0 * K1 * K2 / h / h)
            + consts.Kb * consts.borate_total / (consts.Kb + h)
            + consts.Kw / h - h)

def co2_from_alk(h, alk, consts):
    """Aqueous CO2 that gives alkalinity `alk` at `h` (inverse of `alkalinity`)."""
    K1, K2 = consts.K1, consts.K2
    non_carbonate = consts.Kb * consts.borate_total / (consts.Kb + h) + consts.Kw / h - h
    return (alk - non_carbonate) / (K1 / h + 2.0 * K1 * K2 / h / h)


# Gas phase
def fco2_from_co2(s, Kh):
    """Henry's law: fCO2 (atm) in equilibrium with aqueous CO2."""
    return s / Kh

def pco2_from_fco2(fco2, p2f):
    return fco2 / p2f

def co2_from_pco2(pco2, consts):
    """Aqueous CO2 in equilibrium with pCO2 (atm)."""
    fco2 = pco2 * consts.p2f
    return consts.Kh * fco2


def speciate(h, consts, dic=None, co2=None):
    """Back-substitute [H+] into the carbonate partition fractions.

    Exactly one of `dic` or `co2` must be given; the other is derived, then
    bicarbonate and carbonate follow from DIC.
    """
    if (dic is None) == (co2 is None):
        raise InvalidInputError("speciate needs exactly one of dic or co2.")
    K1, K2 = consts.K1, consts.K2
    if dic is None:
        dic = dic_from_co2(h, co2, K1, K2)
    else:
        co2 = co2_from_dic(h, dic, K1, K2)
    return Speciation(
        dic=dic,
        co2=co2,
        hco3=bicarbonate(h, dic, K1, K2),
        co3=carbonate(h, dic, K1, K2),
    )
