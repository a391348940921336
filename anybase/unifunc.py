__all__=('unifunc',)
from functools import wraps
from inspect import signature
from reportlab.lib.utils import isBytes, asUnicode, asBytes
from anybase import config
def unifunc(f=None,tx=0,enc=None,onDecodeError=None):
    '''makes a function which accepts both text and bytes

    the arguments at tx (an index or a tuple of indices into the parameter
    list, matched whether passed by position or keyword) are decoded when
    they are bytes; if the first of them was bytes the result is encoded
    back.  enc defaults to config.encoding at call time.

    onDecodeError(exc, name, arguments) is called with the UnicodeDecodeError,
    the parameter name and the bound arguments; it returns the exception to
    raise instead.
    '''
    if f:
        T = (tx,) if isinstance(tx,int) else tuple(tx)
        sig = signature(f)
        P = list(sig.parameters)
        N = [P[i] for i in T]
        @wraps(f)
        def inner(*args, **kwds):
            e = enc or config.encoding
            bound = sig.bind(*args, **kwds)
            A = bound.arguments
            wasBytes = isBytes(A.get(N[0]))
            for name in N:
                v = A.get(name)
                if isBytes(v):
                    try:
                        A[name] = asUnicode(v,e)
                    except UnicodeDecodeError as x:
                        if onDecodeError is None: raise
                        raise onDecodeError(x,name,A) from x
            r = f(*bound.args, **bound.kwargs)
            return asBytes(r,e) if wasBytes else r
        return inner
    else:
        return lambda f: unifunc(f,tx=tx,enc=enc,onDecodeError=onDecodeError)
