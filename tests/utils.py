from chromalab.utils.hue import hue_difference


def channels_close(actual, expected, tol, hue_index=None):
    """Compare channel tuples, treating ``hue_index`` as an angle (359.9999 is close to 0)."""
    for i, (a, e) in enumerate(zip(actual, expected)):
        diff = hue_difference(a, e) if i == hue_index else a - e
        if abs(diff) > tol:
            return False
    return True
