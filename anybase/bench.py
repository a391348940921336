'''
time convert_base on a large number

    python -m anybase.bench -n 1000 -r 5
'''
__all__ = ('bench',)
from timeit import Timer
from anybase.baseconvert import convert_base, BASE36

def bench(ndigits=1000, repeat=5, number=10, fromdigits=BASE36, todigits='0123456789ABCDEF'):
    '''best seconds per conversion of ndigits copies of the top digit of fromdigits'''
    s = fromdigits[-1]*ndigits
    t = Timer(lambda: convert_base(s, fromdigits, todigits))
    return min(t.repeat(repeat=repeat, number=number))/number

if __name__=='__main__':
    from optparse import OptionParser
    parser = OptionParser("%prog [options]")
    parser.add_option("-n", "--digits",
                      type="int",
                      dest="ndigits",
                      default=1000,
                      help="number of base 36 digits(%default)")
    parser.add_option("-r", "--repeat",
                      type="int",
                      dest="repeat",
                      default=5,
                      help="timing repeats(%default)")
    opts, args = parser.parse_args()
    print('%d digits: %.6f s per conversion' % (opts.ndigits, bench(opts.ndigits, opts.repeat)))
