'''
anybase: convert digit strings between numeral systems of any radix

>>> from anybase import convert_base, Converter
>>> convert_base("ff", "0123456789abcdef", "01234567")
'377'
>>> Converter("01", "0123456789").convert("1010")
'10'
'''
__version__ = '1.0.0'
from anybase.baseconvert import (
        BASE2, BASE8, BASE10, BASE16, BASE36, BASE62, PRESETS,
        BaseConvertError, InvalidAlphabet, InvalidDigit,
        Alphabet, convert_base, Converter,
        )
