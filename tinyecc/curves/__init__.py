"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

from tinyecc import TinyEccError

from . import secp256k1, secp256r1, tiny17


the_curves = {c.Name: c for c in (secp256k1, secp256r1, tiny17)}
for _c in tuple(the_curves.values()):
    for _alias in _c.Aliases:
        the_curves[_alias] = _c


def parse(name):
    """
    Get the curve parameters based on the curve name. Names are case
    insensitive.

    Args:
        name (str): The curve name or one of its aliases.

    Returns:
        module: The curve parameters module.
    """
    try:
        return the_curves[name.lower()]
    except KeyError:
        raise TinyEccError(f"unrecognized curve name {name}")
