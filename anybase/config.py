'''
module level defaults for anybase; change them by assignment, eg

    from anybase import config
    config.limbRadix = 2**32
'''
__all__ = ('limbRadix', 'encoding')

_DEFAULTS = dict(
    limbRadix = 10**9,      #base of each Magnitude limb
    encoding = 'utf8',      #used when digit strings or alphabets arrive as bytes
    )

def _reset():
    '''restore the default values'''
    globals().update(_DEFAULTS)

_reset()
