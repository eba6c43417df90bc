"""Appointing-president party for SCDB justice identifiers.

Several SCDB identifiers are deliberately absent (e.g. early alternates and
spelling variants the database introduced after this table was compiled).
Unmapped identifiers resolve to ``None`` and are listed as warnings by the
preprocessing report.
"""

from enum import Enum


class Affiliation(str, Enum):
    """Party of the appointing president."""

    FEDERALIST = "F"
    DEMOCRATIC_REPUBLICAN = "DR"
    DEMOCRAT = "D"
    REPUBLICAN = "R"
    WHIG = "W"


_F = Affiliation.FEDERALIST
_DR = Affiliation.DEMOCRATIC_REPUBLICAN
_D = Affiliation.DEMOCRAT
_R = Affiliation.REPUBLICAN
_W = Affiliation.WHIG

MEMBER_AFFILIATION: dict[str, Affiliation] = {
    # Washington (no formal party, aligned Federalist)
    "JJay": _F,
    "JRutledge": _F,
    "WCushing": _F,
    "JWilson": _F,
    "JBlair": _F,
    "JIredell": _F,
    "TJohnson": _F,
    "WPaterson": _F,
    "SChase": _F,
    "OEllsworth": _F,
    # J. Adams
    "BWashington": _F,
    "AMoore": _F,
    "JMarshall": _F,
    # Jefferson
    "WJohnson": _DR,
    "HBLivingston": _DR,
    "TTodd": _DR,
    # Madison
    "GDuvall": _DR,
    "JStory": _DR,
    # Monroe
    "SThompson": _DR,
    # J.Q. Adams
    "RTrimble": _DR,
    # Jackson
    "JMcLean": _D,
    "HBaldwin": _D,
    "JMWayne": _D,
    "RBTaney": _D,
    "PPBarbour": _D,
    "JCatron": _D,
    # Van Buren
    "JMcKinley": _D,
    "PVDaniel": _D,
    # Tyler
    "SNelson": _W,
    # Polk
    "LWoodbury": _D,
    "RCGrier": _D,
    # Fillmore
    "BRCurtis": _W,
    # Pierce
    "JACampbell": _D,
    # Buchanan
    "NClifford": _D,
    # Lincoln
    "NHSwayne": _R,
    "SFMiller": _R,
    "DDavis": _R,
    "SJField": _R,
    "SPChase": _R,
    # Grant
    "WStrong": _R,
    "JPBradley": _R,
    "WHunt": _R,
    "MRWaite": _R,
    # Hayes
    "JHarlan1": _R,
    "WBWoods": _R,
    # Garfield
    "SMatthews": _R,
    # Arthur
    "HGray": _R,
    "SBlatchford": _R,
    # Cleveland
    "LQCLamar": _D,
    "MWFuller": _D,
    # B. Harrison
    "DJBrewer": _R,
    "HBBrown": _R,
    "GShiras": _R,
    "HEJackson": _R,
    # Cleveland, second term
    "EDWhite": _D,
    "RWPeckham": _D,
    # McKinley
    "JMcKenna": _R,
    # T. Roosevelt
    "OWHolmes": _R,
    "WRDay": _R,
    "WHMoody": _R,
    # Taft
    "HHLurton": _R,
    "CEHughes": _R,
    "WVanDevanter": _R,
    "JRLamar": _R,
    "MPitney": _R,
    # Wilson
    "JCMcReynolds": _D,
    "LDBrandeis": _D,
    "JHClarke": _D,
    # Harding
    "WHTaft": _R,
    "GSutherland": _R,
    "PButler": _R,
    "ETSanford": _R,
    # Coolidge
    "HFStone": _R,
    # Hoover
    "OJRoberts": _R,
    "BNCardozo": _R,
    # F.D. Roosevelt
    "HLBlack": _D,
    "SFReed": _D,
    "FFrankfurter": _D,
    "WODouglas": _D,
    "FMurphy": _D,
    "JFByrnes": _D,
    "RHJackson": _D,
    "WBRutledge": _D,
    # Truman
    "HHBurton": _D,
    "FMVinson": _D,
    "TCClark": _D,
    "SMinton": _D,
    # Eisenhower
    "EWarren": _R,
    "JHarlan2": _R,
    "WJBrennan": _R,
    "CEWhittaker": _R,
    "PStewart": _R,
    # Kennedy
    "BRWhite": _D,
    "AJGoldberg": _D,
    # L.B. Johnson
    "AFortas": _D,
    "TMarshall": _D,
    # Nixon
    "WEBurger": _R,
    "HBlackmun": _R,
    "LFPowell": _R,
    "WHRehnquist": _R,
    # Ford
    "JPStevens": _R,
    # Reagan
    "SDOConnor": _R,
    "AScalia": _R,
    "AMKennedy": _R,
    # G.H.W. Bush
    "DHSouter": _R,
    "CThomas": _R,
    # Clinton
    "RBGinsburg": _D,
    "SGBreyer": _D,
    "SBreyer": _D,
    # G.W. Bush
    "JGRoberts": _R,
    "SAAlito": _R,
    # Obama
    "SSotomayor": _D,
    "EKagan": _D,
    # Trump
    "NMGorsuch": _R,
    "BMKavanaugh": _R,
    "ACBarrett": _R,
    # Biden
    "KBJackson": _D,
    # Alternate SCDB spellings of justices listed above
    "SOConnor": _R,
    "JRutledge2": _F,
    "LQLamar": _D,
    "EDEWhite": _D,
    "CEHughes1": _R,
    "CEHughes2": _R,
    "HABlackmun": _R,
}


def lookup_affiliation(member_id: str) -> Affiliation | None:
    """Return the appointing party for a member, or None when unmapped."""
    return MEMBER_AFFILIATION.get(member_id)


def parse_affiliation(code: str | None) -> Affiliation | None:
    """Parse a stored party code; unknown or missing codes give None."""
    if not code:
        return None
    try:
        return Affiliation(code)
    except ValueError:
        return None
