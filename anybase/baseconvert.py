'''
convert digit strings between numeral systems with arbitrary alphabets
'''
__all__ = (
        'BASE2', 'BASE8', 'BASE10', 'BASE16', 'BASE36', 'BASE62', 'PRESETS',
        'BaseConvertError', 'InvalidAlphabet', 'InvalidDigit',
        'Alphabet', 'convert_base', 'Converter',
        )
import logging
from reportlab.lib.utils import isBytes, asUnicode
from anybase import config
from anybase.magnitude import Magnitude
from anybase.unifunc import unifunc

logger = logging.getLogger(__name__)

BASE2 = "01"
BASE8 = "01234567"
BASE10 = "0123456789"
BASE16 = "0123456789abcdef"
BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE62 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789abcdefghijklmnopqrstuvwxyz"
PRESETS = dict(BASE2=BASE2, BASE8=BASE8, BASE10=BASE10, BASE16=BASE16, BASE36=BASE36, BASE62=BASE62)

class BaseConvertError(ValueError):
    pass

class InvalidAlphabet(BaseConvertError):
    '''an alphabet is shorter than two characters, repeats one or is not decodable'''
    def __init__(self, alphabet, char=None, index=None, msg=None):
        self.alphabet = alphabet
        self.char = char
        self.index = index
        if msg is None:
            if char is None:
                msg = 'alphabet %r has radix %d, at least 2 is needed' % (alphabet, len(alphabet))
            else:
                msg = 'alphabet %r repeats %r at index %d' % (alphabet, char, index)
        BaseConvertError.__init__(self, msg)

class InvalidDigit(BaseConvertError):
    '''an input character is not a member of the source alphabet'''
    def __init__(self, char, index, alphabet):
        self.char = char
        self.index = index
        self.alphabet = alphabet
        BaseConvertError.__init__(self, 'invalid digit %r at index %d for alphabet %r' % (char, index, str(alphabet)))

class Alphabet:
    """An ordered set of distinct digit characters; a digit's value is its position.

    >>> a = Alphabet('0123456789abcdef')
    >>> a.radix, a.value('f'), a[10]
    (16, 15, 'a')
    >>> Alphabet('0120') # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    anybase.baseconvert.InvalidAlphabet: alphabet '0120' repeats '0' at index 3
    """
    def __init__(self, digits):
        if isBytes(digits):
            try:
                digits = asUnicode(digits, config.encoding)
            except UnicodeDecodeError as e:
                raise InvalidAlphabet(digits, e.object[e.start:e.start+1], e.start,
                        'alphabet %r is not valid %s at byte %d' % (digits, e.encoding, e.start)) from e
        elif not isinstance(digits, str):
            raise TypeError('alphabet must be a string not %s' % type(digits).__name__)
        # the reverse lookup doubles as the duplicate check
        values = {}
        for i, c in enumerate(digits):
            if c in values:
                raise InvalidAlphabet(digits, c, i)
            values[c] = i
        if len(digits)<2:
            raise InvalidAlphabet(digits)
        self.__dict__.update(digits=digits, radix=len(digits), _values=values)
        logger.debug('alphabet of radix %d', self.radix)

    def __setattr__(self, name, value):
        raise AttributeError('%s is read only' % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is read only' % self.__class__.__name__)

    def value(self, c):
        '''digit value of c or None when c is not a digit'''
        return self._values.get(c)

    def __getitem__(self, i):
        return self.digits[i]

    def __len__(self):
        return self.radix

    def __iter__(self):
        return iter(self.digits)

    def __contains__(self, c):
        return c in self._values

    def __eq__(self, other):
        if isinstance(other, Alphabet): return self.digits==other.digits
        return NotImplemented

    def __hash__(self):
        return hash(self.digits)

    def __str__(self):
        return self.digits

    def __repr__(self):
        return 'Alphabet(%r)' % self.digits

def _alphabet(a):
    return a if isinstance(a, Alphabet) else Alphabet(a)

def _convert(number, src, dst):
    if not isinstance(number, str):
        raise TypeError('number must be a string not %s' % type(number).__name__)
    logger.debug('converting %d digits from radix %d to radix %d', len(number), src.radix, dst.radix)

    # make a Magnitude out of the number
    x = Magnitude()
    b = src.radix
    v = src._values.get
    for i, d in enumerate(number):
        n = v(d)
        if n is None:
            raise InvalidDigit(d, i, src)
        x.mulSmall(b)
        x.addSmall(n)

    # create the result in base dst.radix
    if x.isZero(): return dst[0]
    res = []
    a = res.append
    b = dst.radix
    while not x.isZero():
        a(dst[x.divModSmall(b)])
    res.reverse()
    return ''.join(res)

def _undecodableNumber(e, name, arguments):
    # alphabets are reported before digits
    src = _alphabet(arguments['fromdigits'])
    _alphabet(arguments['todigits'])
    return InvalidDigit(e.object[e.start:e.start+1], e.start, src)

def _undecodableConverterNumber(e, name, arguments):
    return InvalidDigit(e.object[e.start:e.start+1], e.start, arguments['self']._src)

@unifunc(onDecodeError=_undecodableNumber)
def convert_base(number, fromdigits, todigits):
    """ converts a "number" between two bases of arbitrary digits

    The input number is a string of digits from the fromdigits string
    (which is in order of smallest to largest digit). The return value
    is a string of elements from todigits (ordered in the same way).
    The input and output bases are determined from the lengths of the
    digit strings, which must be at least 2 with no repeats.  The empty
    string is zero.  If number is bytes the result is bytes.

    decimal to binary
    >>> convert_base('555',BASE10,BASE2)
    '1000101011'

    binary to decimal
    >>> convert_base('1000101011',BASE2,BASE10)
    '555'

    hexadecimal to octal
    >>> convert_base('ff',BASE16,BASE8)
    '377'

    base10 to base4
    >>> convert_base('99',BASE10,"0123")
    '1203'

    base4 to base5 (with alphabetic digits)
    >>> convert_base('1203',"0123","abcde")
    'dee'

    base5, alpha digits back to base 10
    >>> convert_base('dee',"abcde",BASE10)
    '99'

    decimal to a base that uses A-Z0-9a-z for its digits
    >>> convert_base('257938572394',BASE10,BASE62)
    'E78Lxik'

    ..convert back
    >>> convert_base('E78Lxik',BASE62,BASE10)
    '257938572394'

    zeros, leading zeros and the empty string
    >>> convert_base('0',BASE10,BASE62)
    'A'
    >>> convert_base('',BASE2,BASE10)
    '0'
    >>> convert_base('000101',BASE2,BASE10)
    '5'

    bytes in, bytes out
    >>> convert_base(b'12345',BASE10,BASE36)
    b'9ix'

    characters not in fromdigits
    >>> convert_base('g',BASE16,BASE2) # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    anybase.baseconvert.InvalidDigit: invalid digit 'g' at index 0 for alphabet '0123456789abcdef'
    """
    return _convert(number, _alphabet(fromdigits), _alphabet(todigits))

class Converter:
    """Converts digit strings from one fixed alphabet to another.

    Both alphabets are validated here, so a bad alphabet raises
    InvalidAlphabet at construction rather than at first use.

    >>> c = Converter(BASE2, BASE10)
    >>> c.convert('1010')
    '10'
    >>> c.inverse().convert('10')
    '1010'
    >>> c.src_base, c.dst_base
    (2, 10)
    """
    def __init__(self, src_table, dst_table):
        self._src = _alphabet(src_table)
        self._dst = _alphabet(dst_table)

    src_table = property(lambda self: self._src.digits)
    dst_table = property(lambda self: self._dst.digits)
    src_base = property(lambda self: self._src.radix)
    dst_base = property(lambda self: self._dst.radix)

    @unifunc(tx=1, onDecodeError=_undecodableConverterNumber)
    def convert(self, number):
        return _convert(number, self._src, self._dst)

    def inverse(self):
        '''a Converter going the other way'''
        return self.__class__(self._dst, self._src)

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.src_table, self.dst_table)

def _test():
    import doctest
    return doctest.testmod()

if __name__ == "__main__":
    _test()
