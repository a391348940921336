"""Command line front end for convert_base.

    anybase -f BASE2 -t BASE10 1010 11111111
"""
import sys
import logging
from anybase import __version__
from anybase.baseconvert import Converter, BaseConvertError, PRESETS

logger = logging.getLogger('anybase')

def parseCommandLine(argv=None):
    """Examines options and does preliminary checking"""
    from optparse import OptionParser

    parser = OptionParser(usage="%prog [options] NUMBER...",version='%prog '+__version__)
    parser.add_option("-f", "--from",
                      dest="src",
                      default='BASE10',
                      help="source alphabet or one of %s (%%default)" % ', '.join(sorted(PRESETS)))
    parser.add_option("-t", "--to",
                      dest="dst",
                      default='BASE16',
                      help="target alphabet or preset name (%default)")
    parser.add_option("-v", "--verbose",
                      action="count", dest="verbose", default=0,
                      help="log what is going on to stderr")
    options,args = parser.parse_args(argv)
    if not len(args):
        parser.error("needs at least one NUMBER argument")
    return parser,options,args

def main(argv=None):
    parser,options,args = parseCommandLine(argv)
    if options.verbose:
        if not logger.handlers:
            logger.addHandler(logging.StreamHandler(sys.stderr))
        logger.setLevel(logging.DEBUG)
    try:
        converter = Converter(PRESETS.get(options.src,options.src),PRESETS.get(options.dst,options.dst))
    except BaseConvertError as e:
        parser.error(str(e))
    status = 0
    for number in args:
        try:
            print(converter.convert(number))
        except BaseConvertError as e:
            print('%s: %s' % (parser.get_prog_name(),e), file=sys.stderr)
            status = 1
    return status

if __name__=='__main__':
    sys.exit(main())
