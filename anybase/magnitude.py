'''
arbitrary precision non-negative integers as little endian limb arrays

Only the operations needed to move a value between numeral systems are
provided: multiply by a small value, add a small value and divide by a
small value keeping the remainder.

>>> x = Magnitude()
>>> for d in (2, 5, 5):
...     x.mulSmall(10)
...     x.addSmall(d)
>>> int(x)
255
>>> x.divModSmall(16), int(x)
(15, 15)
'''
__all__ = ('Magnitude',)
from anybase import config

class Magnitude:
    """A non-negative integer held as limbs in base radix, least significant first.

    The radix defaults to config.limbRadix at creation time.  There are never
    any most significant zero limbs, except for zero itself which is [0].

    >>> Magnitude([999999999, 999999999]).limbs
    [999999999, 999999999]
    >>> m = Magnitude([999999999, 999999999])
    >>> m.addSmall(1)
    >>> m.limbs
    [0, 0, 1]
    >>> Magnitude([5, 0, 0]).limbs
    [5]
    >>> Magnitude.fromInt(2**70, radix=2**32).limbs
    [0, 0, 64]
    """
    def __init__(self, limbs=None, radix=None):
        self.radix = config.limbRadix if radix is None else radix
        if self.radix<2:
            raise ValueError('limb radix must be at least 2 not %r' % self.radix)
        limbs = list(limbs or ())
        if limbs:
            for l in limbs:
                if not 0<=l<self.radix:
                    raise ValueError('limb %r out of range for radix %d' % (l,self.radix))
            self.limbs = limbs
            self.normalize()
        else:
            self.limbs = [0]

    @classmethod
    def fromInt(cls, n, radix=None):
        if n<0:
            raise ValueError('Magnitude cannot be negative: %r' % n)
        m = cls(radix=radix)
        r = m.radix
        L = []
        while n:
            n, l = divmod(n,r)
            L.append(l)
        if L: m.limbs = L
        return m

    def isZero(self):
        return len(self.limbs)==1 and self.limbs[0]==0

    def normalize(self):
        '''remove most significant zero limbs'''
        L = self.limbs
        while len(L)>1 and L[-1]==0:
            L.pop()

    def mulSmall(self, m):
        '''self *= m'''
        if m<0:
            raise ValueError('cannot multiply a Magnitude by negative %r' % m)
        if m==0:
            self.limbs = [0]
            return
        if m==1: return
        r = self.radix
        L = self.limbs
        carry = 0
        for i in range(len(L)):
            carry, L[i] = divmod(L[i]*m+carry, r)
        while carry:
            carry, l = divmod(carry, r)
            L.append(l)

    def addSmall(self, a):
        '''self += a'''
        if a<0:
            raise ValueError('cannot add negative %r to a Magnitude' % a)
        r = self.radix
        L = self.limbs
        carry = a
        for i in range(len(L)):
            if not carry: break
            carry, L[i] = divmod(L[i]+carry, r)
        while carry:
            carry, l = divmod(carry, r)
            L.append(l)

    def divModSmall(self, d):
        '''self //= d in place and return the remainder'''
        if not d:
            raise ZeroDivisionError('Magnitude division by zero')
        if d<0:
            raise ValueError('cannot divide a Magnitude by negative %r' % d)
        r = self.radix
        L = self.limbs
        rem = 0
        # most significant limb first
        for i in range(len(L)-1,-1,-1):
            L[i], rem = divmod(rem*r+L[i], d)
        self.normalize()
        return rem

    def __int__(self):
        n = 0
        r = self.radix
        for l in reversed(self.limbs):
            n = n*r + l
        return n

    def __len__(self):
        return len(self.limbs)

    def __eq__(self, other):
        if not isinstance(other, Magnitude): return NotImplemented
        if self.radix==other.radix: return self.limbs==other.limbs
        return int(self)==int(other)

    __hash__ = None

    def __repr__(self):
        return '%s(%r, radix=%d)' % (self.__class__.__name__, self.limbs, self.radix)

def _test():
    import doctest
    return doctest.testmod()

if __name__ == "__main__":
    _test()
